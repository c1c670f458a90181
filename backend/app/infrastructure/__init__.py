"""Infrastructure Layer — database pool and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - SQLAlchemy errors from store operations and sessions mapped to
      DatabaseError before leaving this layer
"""
