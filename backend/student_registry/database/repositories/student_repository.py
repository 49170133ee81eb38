# student_registry/database/repositories/student_repository.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import Student

logger = logging.getLogger(__name__)


class StudentRepository:
    """Persistence access for Student rows, bound to one database session"""

    def __init__(self, db: Session):
        self.db = db

    def save(self, student: Student) -> Student:
        """
        Insert or update a student and return it with its assigned id
        Raises sqlalchemy IntegrityError on a duplicate email
        """
        self.db.add(student)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(student)

        return student

    def find_all(self) -> List[Student]:
        return self.db.query(Student).order_by(Student.id).all()

    def find_by_id(self, student_id: int) -> Optional[Student]:
        return self.db.query(Student).filter(
            Student.id == student_id
        ).first()

    def find_all_by_first_name_containing(self, name: str) -> List[Student]:
        """
        Students whose first name contains `name`, case-sensitive
        """
        candidates = self.db.query(Student).filter(
            Student.first_name.contains(name, autoescape=True)
        ).order_by(Student.id).all()

        # LIKE ignores case on SQLite
        return [student for student in candidates if name in student.first_name]

    def delete_by_id(self, student_id: int) -> None:
        """Delete a student (and its profile). Unknown ids are a no-op."""
        student = self.find_by_id(student_id)

        if not student:
            logger.debug(f"No student {student_id} to delete")
            return

        self.db.delete(student)
        self.db.commit()
