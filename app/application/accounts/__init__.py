"""
Application layer for the accounts bounded context.

Implements the TraderAccountService port on top of the
TraderAccountRepository port. No framework imports allowed.
"""
