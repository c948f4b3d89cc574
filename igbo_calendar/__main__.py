"""Entry point for ``python -m igbo_calendar``."""

from igbo_calendar.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
