"""
Test suite for atm-cash

Contains:
- tests/unit/          : Unit tests for individual modules and scenarios
"""
