"""Pydantic Schemas: request DTOs and response view-models for API endpoints.

Invariants:
    - Every write DTO declares its permitted fields; unknown keys are ignored, never stored
    - Response models are built from ORM objects (from_attributes) or from unsaved field dicts

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
