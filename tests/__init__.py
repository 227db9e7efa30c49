"""
Test suite for the arbitrary-precision decimal engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
