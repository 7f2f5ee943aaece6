"""
Trader Accounts — account lifecycle and funds service.

Application package root. A small service using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - accounts: Trader account creation and deletion, deposits, withdrawals.

Layers:
    - domain: Entities, money rules, outcomes, ports (ABCs), errors.
    - application: The account service orchestrating the repository port.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: Gateway, FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
