"""Infrastructure Layer - database pool, repositories and logging.

Invariants:
    - Infrastructure never contains HTTP concerns (status codes live in core/errors.py)
    - All database calls go through DatabaseSessionManager.session()
"""
