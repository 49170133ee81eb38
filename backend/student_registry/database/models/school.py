# student_registry/database/models/school.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..base import Base

class School(Base):
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    # Students reference the school by school_id
    students = relationship("Student", back_populates="school", order_by="Student.id")

    def __repr__(self):
        return f"<School {self.id} {self.name}>"
