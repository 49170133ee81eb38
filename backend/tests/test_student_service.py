# =============================================================================
# tests/test_student_service.py - StudentService Tests
# =============================================================================
# The repository and mapper are replaced with mocks so only the service's
# orchestration is under test.
# =============================================================================

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from student_registry.database.models import Student
from student_registry.exceptions import InvalidInputError
from student_registry.mappers.student_mapper import StudentMapper
from student_registry.schemas.student import StudentDto, StudentResponseDto
from student_registry.services.student_service import StudentService


def make_student(first_name="Alucard", last_name="Tepes", email="Vamp@mail.com", age=20):
    return Student(first_name=first_name, last_name=last_name, email=email, age=age)


@pytest.fixture
def repository():
    return MagicMock()


@pytest.fixture
def mapper():
    return MagicMock(spec=StudentMapper)


@pytest.fixture
def service(repository, mapper):
    return StudentService(repository, mapper)


class TestSaveStudent:

    def test_saves_a_student(self, service, repository, mapper):
        dto = StudentDto(first_name="Alucard", last_name="Tepes", email="Vamp@mail.com", school_id=1)
        student = make_student()
        saved_student = make_student()
        saved_student.id = 1

        mapper.to_entity.return_value = student
        repository.save.return_value = saved_student
        mapper.to_response_dto.return_value = StudentResponseDto(
            first_name="Alucard", last_name="Tepes", email="Vamp@mail.com"
        )

        response = service.save_student(dto)

        assert response.first_name == dto.first_name
        assert response.last_name == dto.last_name
        assert response.email == dto.email

        mapper.to_entity.assert_called_once_with(dto)
        repository.save.assert_called_once_with(student)
        mapper.to_response_dto.assert_called_once_with(saved_student)

    def test_round_trip_with_real_mapper(self, repository):
        service = StudentService(repository, StudentMapper())
        dto = StudentDto(first_name="Alucard", last_name="Tepes", email="Vamp@mail.com", school_id=1)

        def assign_id(student):
            student.id = 99
            return student

        repository.save.side_effect = assign_id

        response = service.save_student(dto)

        assert response == StudentResponseDto(first_name="Alucard", last_name="Tepes", email="Vamp@mail.com")

    def test_null_dto_propagates_invalid_input(self, repository):
        service = StudentService(repository, StudentMapper())

        with pytest.raises(InvalidInputError):
            service.save_student(None)

        repository.save.assert_not_called()

    def test_persistence_errors_propagate(self, service, repository, mapper):
        repository.save.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

        with pytest.raises(IntegrityError):
            service.save_student(StudentDto(first_name="A", last_name="B", email="dup@mail.com"))

        mapper.to_response_dto.assert_not_called()


class TestFindStudents:

    def test_returns_all_students(self, service, repository, mapper):
        students = [make_student()]
        repository.find_all.return_value = students
        mapper.to_response_dto.return_value = StudentResponseDto(
            first_name="Alucard", last_name="Tepes", email="Vamp@mail.com"
        )

        response = service.find_all_students()

        assert len(response) == len(students)
        repository.find_all.assert_called_once_with()

    def test_find_all_keeps_repository_order(self, repository):
        service = StudentService(repository, StudentMapper())
        repository.find_all.return_value = [
            make_student(first_name="Zed", email="z@mail.com"),
            make_student(first_name="Amy", email="a@mail.com"),
            make_student(first_name="Max", email="m@mail.com"),
        ]

        response = service.find_all_students()

        assert [dto.first_name for dto in response] == ["Zed", "Amy", "Max"]

    def test_find_all_empty(self, service, repository):
        repository.find_all.return_value = []

        assert service.find_all_students() == []

    def test_returns_student_by_id(self, service, repository, mapper):
        student = make_student()
        repository.find_by_id.return_value = student
        mapper.to_response_dto.return_value = StudentResponseDto(
            first_name="Alucard", last_name="Tepes", email="Vamp@mail.com"
        )

        dto = service.find_student_by_id(1)

        assert dto.first_name == student.first_name
        assert dto.last_name == student.last_name
        assert dto.email == student.email
        repository.find_by_id.assert_called_once_with(1)

    def test_missing_student_returns_none(self, service, repository, mapper):
        repository.find_by_id.return_value = None

        assert service.find_student_by_id(42) is None
        mapper.to_response_dto.assert_not_called()

    def test_finds_students_by_name(self, service, repository, mapper):
        students = [make_student()]
        repository.find_all_by_first_name_containing.return_value = students
        mapper.to_response_dto.return_value = StudentResponseDto(
            first_name="Alucard", last_name="Tepes", email="Vamp@mail.com"
        )

        response = service.find_students_by_name("Alucard")

        assert len(response) == len(students)
        repository.find_all_by_first_name_containing.assert_called_once_with("Alucard")


class TestDeleteStudent:

    def test_deletes_student(self, service, repository):
        service.delete(1)

        repository.delete_by_id.assert_called_once_with(1)

    def test_does_not_check_existence_first(self, service, repository):
        service.delete(404)

        repository.find_by_id.assert_not_called()
        repository.delete_by_id.assert_called_once_with(404)
