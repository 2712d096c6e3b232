"""
Blog API

REST API for authors, author profiles, categories and posts.

Package Structure:
==================
    blog_api/
    ├── api/        ← FastAPI application (routes, handlers, middleware)
    ├── shared/     ← Models, repositories, services, schemas, db, core
    └── config/     ← Configuration

Running the Application:
========================
    # Using the configured HOST/PORT
    python -m blog_api

    # Or directly with uvicorn
    uvicorn blog_api.api.main:app --reload
"""

__version__ = "1.0.0"
