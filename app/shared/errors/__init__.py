"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that account failures
are consistently translated into API responses.
"""
