"""
Accounts bounded context — domain layer.

This module contains all domain logic for trader accounts:
- Trader and Account entities
- Cent truncation of monetary amounts
- Typed outcomes returned by the account service
- Ports for the service and its persistence
"""
