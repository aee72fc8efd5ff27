from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from hr_api.core.exceptions import LeaveConflictError, ResourceNotFoundError, ValidationError
from hr_api.models.employee import Employee
from hr_api.models.leave import Leave, LeaveType
from hr_api.services.base import BaseService


class LeaveService(BaseService):
    """Leave requests and the per-employee overlap rule."""

    def __init__(self, db: Session, today=date.today):
        super().__init__(db)
        self.today = today

    def has_overlap(
        self,
        employee_id: UUID,
        start: date,
        end: date,
        exclude_leave_id: Optional[UUID] = None,
    ) -> bool:
        """
        True if any existing leave of the employee intersects [start, end].
        Both ranges are closed, so a single-day leave still counts.
        """
        query = self.db.query(Leave.id).filter(
            Leave.employee_id == employee_id,
            Leave.start_date <= end,
            Leave.end_date >= start,
        )
        if exclude_leave_id is not None:
            query = query.filter(Leave.id != exclude_leave_id)
        return query.first() is not None

    def request_leave(self, employee_id: UUID, start: date, end: date, leave_type: LeaveType) -> Leave:
        self._validate_dates(start, end, leave_type)
        if self.db.get(Employee, employee_id) is None:
            raise ResourceNotFoundError("Employee", employee_id)
        if self.has_overlap(employee_id, start, end):
            raise LeaveConflictError()

        leave = Leave(employee_id=employee_id, start_date=start, end_date=end, type=leave_type)
        self.db.add(leave)
        self.commit()
        self.db.refresh(leave)
        self.log_info("Leave requested", employee_id=str(employee_id), leave_id=str(leave.id))
        return leave

    def update_leave(self, leave_id: UUID, start: date, end: date, leave_type: LeaveType) -> Leave:
        leave = self.get_leave(leave_id)
        self._validate_dates(start, end, leave_type)
        if self.has_overlap(leave.employee_id, start, end, exclude_leave_id=leave.id):
            raise LeaveConflictError()

        leave.start_date = start
        leave.end_date = end
        leave.type = leave_type
        self.commit()
        self.db.refresh(leave)
        return leave

    def get_leave(self, leave_id: UUID) -> Leave:
        leave = self.db.get(Leave, leave_id)
        if leave is None:
            raise ResourceNotFoundError("Leave", leave_id)
        return leave

    def list_by_employee(self, employee_id: UUID) -> List[Leave]:
        return self.db.query(Leave).filter(
            Leave.employee_id == employee_id
        ).order_by(Leave.start_date).all()

    def list_by_date_range(self, start: date, end: date) -> List[Leave]:
        """Every leave that intersects the closed range [start, end]."""
        if start > end:
            raise ValidationError("startDate must not be after endDate")
        return self.db.query(Leave).filter(
            Leave.start_date <= end,
            Leave.end_date >= start,
        ).order_by(Leave.start_date).all()

    def cancel_leave(self, leave_id: UUID) -> None:
        leave = self.get_leave(leave_id)
        self.db.delete(leave)
        self.commit()
        self.log_info("Leave cancelled", leave_id=str(leave_id))

    def _validate_dates(self, start: date, end: date, leave_type: LeaveType) -> None:
        if start > end:
            raise ValidationError("Start date must be on or before end date")
        # Sick leave may be registered after the fact
        if leave_type != LeaveType.SICK and start < self.today():
            raise ValidationError("Leave cannot be requested for past dates")
