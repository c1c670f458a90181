"""Route Modules — one file per counter resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain SQL (delegate to services/counter_store)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
