"""
Test suite for chained-calculator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
