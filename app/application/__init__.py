"""
Application layer package.

Contains services that coordinate domain entities and ports.
No framework or infrastructure imports allowed.
"""
