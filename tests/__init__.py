"""
Test suite for the simulation domain geometry.

Contains:
- tests/unit/          : Unit tests for domain models, contracts and config loading
"""
