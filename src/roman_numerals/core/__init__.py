"""
Core domain models, arithmetic primitives, and contracts.

This module contains the foundational building blocks of the converter:
symbol tables, the conversion algorithms and the JSON contract.
"""
