"""Infrastructure Layer — store access, credential primitives, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - Library exceptions (SQLAlchemy, PyJWT, bcrypt) are mapped to core/errors.py here
"""
