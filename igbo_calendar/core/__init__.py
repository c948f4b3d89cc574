"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the calendar that are
independent of any rendering or storage layer.
"""
