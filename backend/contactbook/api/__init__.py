"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; every error body is {"error": "<message>"}

Design Decisions:
    - Thin routes: parsing and validation live in core/, persistence behind
      the ContactRepository protocol
"""
