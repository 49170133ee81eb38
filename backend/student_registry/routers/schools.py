from typing import List

from fastapi import APIRouter

from student_registry.dependencies import SchoolServiceDep
from student_registry.schemas.school import SchoolDto

router = APIRouter(prefix="/schools", tags=["schools"])


@router.post("", response_model=SchoolDto)
def create_school(dto: SchoolDto, service: SchoolServiceDep):
    return service.create(dto)


@router.get("", response_model=List[SchoolDto])
def find_all_schools(service: SchoolServiceDep):
    return service.find_all()
