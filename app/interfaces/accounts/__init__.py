"""
HTTP interface for the accounts bounded context.

The AccountFundsGateway turns requests into service calls and
service outcomes into responses or HTTP errors.
"""
