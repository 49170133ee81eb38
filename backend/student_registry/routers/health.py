from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from student_registry.config import settings
from student_registry.database.session import get_db, check_database

router = APIRouter(tags=["health"])


@router.get("/")
def root():
    return {
        "status": "ok",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION
    }


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    database_ok = check_database(db)
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "connected" if database_ok else "disconnected"
    }
