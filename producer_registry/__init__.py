"""Producer Registry — CRUD API for agricultural producers.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
