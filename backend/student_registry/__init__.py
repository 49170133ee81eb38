"""
Student Registry API

CRUD backend for students and schools:
- FastAPI routers for the HTTP boundary
- SQLAlchemy models and repositories for persistence
- Mappers between request/response DTOs and entities
"""

__version__ = "1.0.0"
