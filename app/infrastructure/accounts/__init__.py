"""
Infrastructure adapters for the accounts bounded context.

Each adapter implements a domain port (ABC) and connects
to the relational database through SQLAlchemy.
"""
