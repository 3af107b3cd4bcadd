"""Pydantic Schemas — request/response models for API boundaries.

Invariants:
    - All API inputs validated through Pydantic before reaching route logic
    - Schemas are pure data — no IO, no DB access
"""
