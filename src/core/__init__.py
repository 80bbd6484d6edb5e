"""
Core domain models, temporal algorithms, and contracts.

This module contains the GML time value objects and the rules for
comparing, equating and resolving them. It is independent of the
surrounding sensor-data service (parsers, storage, responses).
"""
