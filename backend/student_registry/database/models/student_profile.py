# student_registry/database/models/student_profile.py
from sqlalchemy import Column, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..base import Base

class StudentProfile(Base):
    __tablename__ = "student_profiles"

    id = Column(Integer, primary_key=True, index=True)
    bio = Column(Text, nullable=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, unique=True)

    # Relationships
    student = relationship("Student", back_populates="profile")
