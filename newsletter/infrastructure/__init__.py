"""Infrastructure Layer — database pool, schema migrations, and logging setup.

Invariants:
    - Infrastructure failures are mapped to core/errors.py types before leaving this layer
"""
