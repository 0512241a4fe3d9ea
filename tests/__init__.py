"""
Test suite for Cash Register

Contains:
- tests/unit/          : Unit tests for individual modules
"""
