"""
Irenet Backend — Application Package Initializer
================================================

What: Marks the `irenet` directory as a Python package.
Who:  Imported by uvicorn (`irenet.main:app`), Alembic, and pytest.

Architecture Note:
    The backend is split into the same four layers for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (Resource Logic)    │  ← presence checks, matching
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Resources: users, organizations, donations, requests, matches.
    Nothing depends sideways; every layer only calls the one below it.
"""

__version__ = "1.0.0"
