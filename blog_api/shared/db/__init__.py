"""
Database Module

This module provides database connectivity and session management.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   FastAPI Route                                                             │
│       │                                                                     │
│       │  Dependency Injection: get_db()                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              AsyncSession (from session.py)                 │          │
│   │                                                             │          │
│   │  - One session per request                                  │          │
│   │  - Auto-commit on success                                   │          │
│   │  - Auto-rollback on exception                               │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       │  Passed to Services → Repositories                                  │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Repository (from repositories/)                │          │
│   │                                                             │          │
│   │  - AuthorRepository                                         │          │
│   │  - ProfileRepository                                        │          │
│   │  - CategoryRepository                                       │          │
│   │  - PostRepository                                           │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       │  SQL Queries                                                        │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Relational Database                            │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘
"""

from blog_api.shared.db.session import (
    get_db,
    init_db,
    close_db,
    ping,
    build_engine,
    build_session_factory,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    # Session management
    "get_db",  # FastAPI dependency for getting a database session
    "init_db",  # Verify the database on app startup
    "close_db",  # Dispose the engine on app shutdown
    "ping",  # Readiness probe query
    "build_engine",
    "build_session_factory",
    "AsyncSessionLocal",  # Session factory for manual session creation
    "engine",  # Database engine (for migrations, etc.)
]
