from typing import Annotated, List

from fastapi import APIRouter, Path, Response, status

from student_registry.dependencies import StudentServiceDep
from student_registry.exceptions import StudentNotFoundError
from student_registry.schemas.student import MAX_ID, StudentDto, StudentResponseDto

router = APIRouter(prefix="/students", tags=["students"])

# Ids outside the INTEGER column range are rejected as a 400
StudentId = Annotated[int, Path(ge=1, le=MAX_ID)]


@router.post("", response_model=StudentResponseDto)
def save_student(dto: StudentDto, service: StudentServiceDep):
    return service.save_student(dto)


@router.get("", response_model=List[StudentResponseDto])
def find_all_students(service: StudentServiceDep):
    return service.find_all_students()


@router.get("/search/{student_name}", response_model=List[StudentResponseDto])
def find_students_by_name(student_name: str, service: StudentServiceDep):
    return service.find_students_by_name(student_name)


@router.get("/{student_id}", response_model=StudentResponseDto)
def find_student_by_id(student_id: StudentId, service: StudentServiceDep):
    student = service.find_student_by_id(student_id)
    if student is None:
        raise StudentNotFoundError(student_id)

    return student


@router.delete("/{student_id}", status_code=status.HTTP_200_OK, response_class=Response)
def delete_student(student_id: StudentId, service: StudentServiceDep):
    service.delete(student_id)
    return Response(status_code=status.HTTP_200_OK)
