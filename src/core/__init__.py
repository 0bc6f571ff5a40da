"""
Core value types, arithmetic primitives, and bitwise operators.

This module contains the arbitrary-precision integer building blocks; it has
no dependencies on I/O or external systems.
"""
