# student_registry/dependencies.py
# Wiring for FastAPI Depends(). Mappers are built once at import; repositories
# and services are built per request around that request's session.
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from .database.repositories.school_repository import SchoolRepository
from .database.repositories.student_repository import StudentRepository
from .database.session import get_db
from .mappers.school_mapper import SchoolMapper
from .mappers.student_mapper import StudentMapper
from .services.school_service import SchoolService
from .services.student_service import StudentService

student_mapper = StudentMapper()
school_mapper = SchoolMapper()


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    return StudentService(StudentRepository(db), student_mapper)


def get_school_service(db: Session = Depends(get_db)) -> SchoolService:
    return SchoolService(SchoolRepository(db), school_mapper)


StudentServiceDep = Annotated[StudentService, Depends(get_student_service)]
SchoolServiceDep = Annotated[SchoolService, Depends(get_school_service)]
