from dataclasses import dataclass
from typing import List
from uuid import UUID

from sqlalchemy import func

from hr_api.core.exceptions import ResourceNotFoundError
from hr_api.models.department import Department
from hr_api.models.employee import Employee
from hr_api.models.leave import Leave
from hr_api.services.base import BaseService


@dataclass(frozen=True)
class DepartmentReport:
    department_name: str
    employee_count: int
    leave_count: int


class ReportService(BaseService):
    """Headcount and leave totals per department."""

    def department_reports(self) -> List[DepartmentReport]:
        departments = self.db.query(Department).order_by(Department.name).all()
        return [self._report_for(dept) for dept in departments]

    def department_report(self, department_id: UUID) -> DepartmentReport:
        department = self.db.get(Department, department_id)
        if department is None:
            raise ResourceNotFoundError("Department", department_id)
        return self._report_for(department)

    def _report_for(self, department: Department) -> DepartmentReport:
        employee_count = self.db.query(func.count(Employee.id)).filter(
            Employee.department_id == department.id
        ).scalar() or 0
        leave_count = self.db.query(func.count(Leave.id)).join(
            Employee, Leave.employee_id == Employee.id
        ).filter(
            Employee.department_id == department.id
        ).scalar() or 0
        return DepartmentReport(
            department_name=department.name,
            employee_count=employee_count,
            leave_count=leave_count,
        )
