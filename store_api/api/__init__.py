"""API Layer — FastAPI routes, the authentication gate and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is JSON; failures are always {"message": str}

Design Decisions:
    - Thin routes delegate to services/ handler classes
"""
