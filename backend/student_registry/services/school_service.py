# student_registry/services/school_service.py
import logging
from typing import List

from ..database.repositories.school_repository import SchoolRepository
from ..mappers.school_mapper import SchoolMapper
from ..schemas.school import SchoolDto

logger = logging.getLogger(__name__)


class SchoolService:

    def __init__(self, repository: SchoolRepository, mapper: SchoolMapper):
        self.repository = repository
        self.mapper = mapper

    def create(self, dto: SchoolDto) -> SchoolDto:
        """Save a new school and echo back the request DTO"""
        school = self.repository.save(self.mapper.to_entity(dto))
        logger.info(f"Created school: {school.id}")
        return dto

    def find_all(self) -> List[SchoolDto]:
        return [self.mapper.to_dto(school) for school in self.repository.find_all()]
