"""
Test suite for kapoio-unit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
