# student_registry/mappers/student_mapper.py
from typing import Optional

from ..database.models import Student
from ..exceptions import InvalidInputError
from ..schemas.student import StudentDto, StudentResponseDto

NULL_DTO_MESSAGE = "the student DTO should not be null"


class StudentMapper:
    """Converts between student DTOs and Student entities. Holds no state."""

    def to_entity(self, dto: Optional[StudentDto]) -> Student:
        """
        Build a new, unsaved Student from the request DTO.

        Names and email are copied as-is. The school is attached by id only;
        the school row is not loaded or checked. Age is left unset.
        """
        if dto is None:
            raise InvalidInputError(NULL_DTO_MESSAGE)

        student = Student()
        student.first_name = dto.first_name
        student.last_name = dto.last_name
        student.email = dto.email
        student.school_id = dto.school_id
        return student

    def to_response_dto(self, student: Student) -> StudentResponseDto:
        return StudentResponseDto(
            first_name=student.first_name,
            last_name=student.last_name,
            email=student.email,
        )
