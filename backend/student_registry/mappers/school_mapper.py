# student_registry/mappers/school_mapper.py
from ..database.models import School
from ..schemas.school import SchoolDto


class SchoolMapper:

    def to_entity(self, dto: SchoolDto) -> School:
        return School(name=dto.name)

    def to_dto(self, school: School) -> SchoolDto:
        return SchoolDto(name=school.name)
