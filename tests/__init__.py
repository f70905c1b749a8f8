"""
Test suite for matrixkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
