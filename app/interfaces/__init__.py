"""
Interfaces layer package.

Contains the account gateway, FastAPI routers and Pydantic
request/response schemas. No business logic belongs here.
"""
