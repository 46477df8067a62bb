"""
Test suite for nonzero

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/unit/test_properties.py : Hypothesis property-based tests
"""
