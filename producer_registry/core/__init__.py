"""Core Layer — error types, pure rules and boundary protocols. No IO, no DB.

Invariants:
    - Nothing in core/ imports from services/, api/, infrastructure/ or db/
    - Rule functions are pure and deterministic
"""
