"""
Test suite for imagine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
