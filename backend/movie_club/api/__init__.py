"""API Layer — FastAPI routes, authentication guard, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Protected routes depend on auth_guard.require_user
"""
