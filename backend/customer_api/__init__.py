"""
Customer API — Application Package Initializer
===============================================

What: Marks the `customer_api` directory as a Python package.
Why:  Enables module imports like `from customer_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The service follows the same thin layering on every request:

    ┌─────────────────────────────────────┐
    │     Routes + Auth (API Layer)       │  ← HTTP, bearer token, policies
    ├─────────────────────────────────────┤
    │       Services (CRUD operations)    │  ← Lookup, insert, replace, delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the ORM directly; services never see HTTP objects.
"""

__version__ = "1.0.0"
