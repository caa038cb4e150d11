"""Pydantic Schemas — request/response models for API endpoints.

Invariants:
    - Schemas describe the wire format; persistence lives in models/

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
