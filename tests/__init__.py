"""
Test suite for gml-time

Contains:
- tests/unit/          : Unit tests for domain models, temporal algorithms and contracts
"""
