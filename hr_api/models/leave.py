import enum
import uuid
from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from hr_api.database import Base


class LeaveType(str, enum.Enum):
    VACATION = "VACATION"
    SICK = "SICK"
    UNPAID = "UNPAID"


class Leave(Base):
    __tablename__ = "leaves"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    employee_id = Column(Uuid, ForeignKey("employees.id"), nullable=False, index=True)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)  # inclusive
    type = Column(Enum(LeaveType), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employee = relationship("Employee", back_populates="leaves")

    def __repr__(self):
        return f"<Leave {self.type.value} {self.start_date}..{self.end_date}>"
