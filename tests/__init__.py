"""
Test suite for humanise

Contains:
- tests/unit/          : Unit tests for individual modules
"""
