"""
Test suite for decimal-bigint

Contains:
- tests/unit/          : Unit tests for individual modules
"""
