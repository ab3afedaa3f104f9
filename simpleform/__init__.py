"""
SimpleForm Backend: Application Package
=======================================

What: Marks the `simpleform` directory as a Python package.
Who:  Imported by uvicorn (`simpleform.main:app`), pytest and the console script.

Architecture Note:
    The service is a thin layered CRUD API over form submissions:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Validation + Store (Services)     │  ← field rules, single-row CRUD
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy engine
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
