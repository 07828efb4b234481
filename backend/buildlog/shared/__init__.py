"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Adapters: Object storage

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← Object storage
    ├── migrations/     ← Alembic revisions
    └── utils/          ← Utilities

Usage:
======
    from buildlog.shared.models import User, Project, CheckIn
    from buildlog.shared.repositories import ProjectRepository
    from buildlog.shared.services import CheckInService
    from buildlog.shared.schemas import CheckInCreate, CheckInResponse
    from buildlog.shared.core import logger, BuildlogException
"""
