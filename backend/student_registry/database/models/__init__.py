# student_registry/database/models/__init__.py
# Import all models to ensure they're registered with Base
from .school import School
from .student import Student
from .student_profile import StudentProfile

__all__ = ["School", "Student", "StudentProfile"]
