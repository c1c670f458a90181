"""Portfolio Counter Backend — view, click, and visit counters for a portfolio site.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
