"""
Foodie Finds API: Application Package
=======================================

Layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← parameters in, status codes out
    ├─────────────────────────────────────┤
    │        Services (Query Layer)       │  ← one SQL statement per operation
    ├─────────────────────────────────────┤
    │   Schemas (Envelopes & Results)     │  ← Pydantic response contracts
    ├─────────────────────────────────────┤
    │      Database (Storage Handle)      │  ← async SQLAlchemy over SQLite
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
