# student_registry/database/repositories/school_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import School


class SchoolRepository:
    """Persistence access for School rows"""

    def __init__(self, db: Session):
        self.db = db

    def save(self, school: School) -> School:
        self.db.add(school)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(school)

        return school

    def find_all(self) -> List[School]:
        return self.db.query(School).order_by(School.id).all()

    def find_by_id(self, school_id: int) -> Optional[School]:
        return self.db.query(School).filter(
            School.id == school_id
        ).first()
