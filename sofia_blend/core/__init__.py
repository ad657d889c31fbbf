"""Core Layer: pure domain logic, no IO, no async, no settings.

Invariants:
    - No module in core/ imports from api/, schemas/, infrastructure/, or config
    - All functions are pure and deterministic; static tables are read-only

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
