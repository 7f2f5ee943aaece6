"""
Domain layer package.

Contains pure business logic: entities, value objects, outcomes
and port interfaces. No framework imports, no IO, no side effects.
"""
