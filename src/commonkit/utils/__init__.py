"""Stateless helpers: argument validation, strings, and type-hierarchy lookup.

Rules
-----
* No I/O.
* Every function is pure apart from raising.
"""
