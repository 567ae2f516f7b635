"""Agency API Package - customer and agent CRUD over a relational database.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
