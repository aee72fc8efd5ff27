"""
Employee Model with the vacation-day ledger.
"""
import uuid
from datetime import date
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from hr_api.database import Base
from hr_api.core.exceptions import InvalidArgumentError, InsufficientBalanceError


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(320), unique=True, index=True, nullable=False)

    department_id = Column(Uuid, ForeignKey("departments.id"), nullable=False, index=True)
    role_id = Column(Uuid, ForeignKey("roles.id"), nullable=False, index=True)

    hire_date = Column(Date, nullable=False, default=date.today)
    vacation_days = Column(Integer, nullable=False, default=0)

    # Optimistic locking: concurrent ledger writes on a stale row fail on flush
    version = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __mapper_args__ = {"version_id_col": version}

    # Relationships
    department = relationship("Department", back_populates="employees")
    role = relationship("Role", back_populates="employees")
    leaves = relationship("Leave", back_populates="employee", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Employee {self.email} ({self.vacation_days} vacation days)>"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def take_vacation(self, days: int) -> None:
        """Debit the balance. Either the whole amount is taken or nothing is."""
        if days <= 0:
            raise InvalidArgumentError("Days must be a positive number")
        balance = self.vacation_days or 0
        if days > balance:
            raise InsufficientBalanceError(requested=days, available=balance)
        self.vacation_days = balance - days

    def add_vacation_days(self, days: int) -> None:
        """Credit the balance. Non-positive amounts are ignored."""
        if days <= 0:
            return
        self.vacation_days = (self.vacation_days or 0) + days
