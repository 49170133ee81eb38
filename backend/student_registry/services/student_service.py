# student_registry/services/student_service.py
import logging
from typing import List, Optional

from ..database.repositories.student_repository import StudentRepository
from ..mappers.student_mapper import StudentMapper
from ..schemas.student import StudentDto, StudentResponseDto

logger = logging.getLogger(__name__)


class StudentService:
    """
    Student use cases. Maps DTOs with the mapper and hands persistence to
    the repository; mapper and persistence errors pass through unchanged.
    """

    def __init__(self, repository: StudentRepository, mapper: StudentMapper):
        self.repository = repository
        self.mapper = mapper

    def save_student(self, dto: StudentDto) -> StudentResponseDto:
        student = self.mapper.to_entity(dto)
        saved_student = self.repository.save(student)
        logger.info(f"Saved student: {saved_student.id}")
        return self.mapper.to_response_dto(saved_student)

    def find_all_students(self) -> List[StudentResponseDto]:
        return [self.mapper.to_response_dto(student) for student in self.repository.find_all()]

    def find_student_by_id(self, student_id: int) -> Optional[StudentResponseDto]:
        """Returns None when no student has this id."""
        student = self.repository.find_by_id(student_id)

        if student is None:
            logger.debug(f"Student not found: {student_id}")
            return None

        return self.mapper.to_response_dto(student)

    def find_students_by_name(self, name: str) -> List[StudentResponseDto]:
        """Students whose first name contains `name` (case-sensitive)."""
        students = self.repository.find_all_by_first_name_containing(name)
        logger.debug(f"Found {len(students)} students matching '{name}'")
        return [self.mapper.to_response_dto(student) for student in students]

    def delete(self, student_id: int) -> None:
        self.repository.delete_by_id(student_id)
        logger.info(f"Deleted student: {student_id}")
