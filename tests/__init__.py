"""
Test suite for liquidation math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
