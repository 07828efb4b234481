"""
Database Module

This module provides database connectivity and session management for Buildlog.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to Service → Repository
        ▼
    PostgreSQL Database

Components:
===========
- session.py: Database engine, session factory, and lifecycle functions

Usage in FastAPI:
=================
    from fastapi import Depends
    from buildlog.shared.db import get_db
    from buildlog.shared.repositories import ProjectRepository

    @app.get("/projects")
    async def list_projects(db: AsyncSession = Depends(get_db)):
        return await ProjectRepository(db).list_for_user(user_id)
"""

from buildlog.shared.db.session import (
    get_db,
    init_db,
    close_db,
    check_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",  # FastAPI dependency for getting a database session
    "init_db",  # Initialize database on app startup
    "close_db",  # Close database on app shutdown
    "check_db",  # Readiness probe
    "AsyncSessionLocal",  # Session factory for manual session creation
    "engine",  # Database engine (for migrations, etc.)
]
