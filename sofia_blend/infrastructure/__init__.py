"""Infrastructure Layer: process-level concerns (logging setup).

Invariants:
    - No business logic; nothing here is imported by core/
"""
