"""
Buildlog Backend

Build-in-public journal: projects, daily check-ins, media uploads and
brand settings.

Package Structure:
==================
    buildlog/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn buildlog.api.main:app --reload
"""
