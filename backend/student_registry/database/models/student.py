# student_registry/database/models/student.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..base import Base
from ...schemas.student import FIRST_NAME_MAX_LENGTH

class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column("c_fname", String(FIRST_NAME_MAX_LENGTH))
    last_name = Column(String)
    email = Column(String, unique=True, index=True)
    age = Column(Integer, nullable=True)  # not set when created through the API
    school_id = Column(Integer, ForeignKey("schools.id"), nullable=True)

    # Relationships
    school = relationship("School", back_populates="students")
    profile = relationship("StudentProfile", back_populates="student", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Student {self.id} {self.first_name} {self.last_name}>"
