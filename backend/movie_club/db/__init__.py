"""Database Infrastructure — SQLAlchemy Base and script-side session factory.

Invariants:
    - All sessions are async (AsyncSession)
"""
