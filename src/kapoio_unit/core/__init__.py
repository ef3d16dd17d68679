"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks: the unit table,
numeric normalization and exact integer conversion.
"""
