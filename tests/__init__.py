"""
Test suite for map-range

Contains:
- tests/unit/          : Unit tests for numeric kinds, intervals and mapping
"""
