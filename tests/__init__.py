"""
Test suite for igbo_calendar

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
