"""
Shared module package.

Contains cross-cutting concerns used by the accounts context:
- Error-to-HTTP mapping
- Security headers and rate limiting
- Logging configuration
"""
