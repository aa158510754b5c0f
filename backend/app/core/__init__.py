"""Core Layer: pure domain rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core (title casing, write pipeline, errors) separated from the
      imperative shell that loads and saves records
"""
