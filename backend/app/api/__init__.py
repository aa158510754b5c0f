"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Reads return JSON view-models; successful writes return 303 redirects

Design Decisions:
    - Thin routes delegate to services/ handlers
"""
