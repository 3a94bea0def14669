"""Shared utilities — pure helpers with no business logic.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""
