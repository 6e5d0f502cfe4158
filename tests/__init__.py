"""
Test suite for roman_numerals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
