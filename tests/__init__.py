"""
Test suite for the expression plotter core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
