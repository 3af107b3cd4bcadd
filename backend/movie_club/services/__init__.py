"""Services Layer — one store class per collection.

Invariants:
    - Each route calls exactly one store method for its main effect
    - Stores raise SQLAlchemy exceptions untouched; routes map them via store_errors()
"""
