from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm.exc import StaleDataError

from hr_api.core.exceptions import (
    ConcurrentModificationError,
    DuplicateResourceError,
    ResourceNotFoundError,
)
from hr_api.models.department import Department
from hr_api.models.employee import Employee
from hr_api.models.role import Role
from hr_api.services.base import BaseService


class EmployeeService(BaseService):
    def create_employee(
        self,
        first_name: str,
        last_name: str,
        email: str,
        department_id: UUID,
        role_id: UUID,
        hire_date: Optional[date] = None,
        vacation_days: int = 0,
    ) -> Employee:
        department = self._get_department(department_id)
        role = self._get_role(role_id)
        self._ensure_email_free(email)

        employee = Employee(
            first_name=first_name,
            last_name=last_name,
            email=email,
            department=department,
            role=role,
            hire_date=hire_date or date.today(),
            vacation_days=vacation_days,
        )
        self.db.add(employee)
        self.commit()
        self.db.refresh(employee)
        self.log_info("Employee created", employee_id=str(employee.id))
        return employee

    def list_employees(self) -> List[Employee]:
        return self.db.query(Employee).order_by(Employee.last_name, Employee.first_name).all()

    def get_employee(self, employee_id: UUID) -> Employee:
        employee = self.db.get(Employee, employee_id)
        if employee is None:
            raise ResourceNotFoundError("Employee", employee_id)
        return employee

    def update_employee(self, employee_id: UUID, **changes) -> Employee:
        """Apply the provided (non-None) fields; references are validated first."""
        employee = self.get_employee(employee_id)
        changes = {k: v for k, v in changes.items() if v is not None}

        if "department_id" in changes:
            employee.department = self._get_department(changes.pop("department_id"))
        if "role_id" in changes:
            employee.role = self._get_role(changes.pop("role_id"))
        if "email" in changes and changes["email"] != employee.email:
            self._ensure_email_free(changes["email"])

        for field_name, value in changes.items():
            setattr(employee, field_name, value)

        self._commit_versioned()
        self.db.refresh(employee)
        return employee

    def delete_employee(self, employee_id: UUID) -> None:
        employee = self.get_employee(employee_id)
        self.db.delete(employee)
        self.commit()
        self.log_info("Employee deleted", employee_id=str(employee_id))

    def list_by_department(self, department_id: UUID) -> List[Employee]:
        return self.db.query(Employee).filter(Employee.department_id == department_id).all()

    def list_by_role(self, role_id: UUID) -> List[Employee]:
        return self.db.query(Employee).filter(Employee.role_id == role_id).all()

    def take_vacation(self, employee_id: UUID, days: int) -> Employee:
        employee = self.get_employee(employee_id)
        employee.take_vacation(days)
        self._commit_versioned()
        self.db.refresh(employee)
        self.log_info("Vacation taken", employee_id=str(employee_id), days=days)
        return employee

    def add_vacation_days(self, employee_id: UUID, days: int) -> Employee:
        employee = self.get_employee(employee_id)
        employee.add_vacation_days(days)
        self._commit_versioned()
        self.db.refresh(employee)
        return employee

    def _commit_versioned(self):
        try:
            self.commit()
        except StaleDataError as e:
            raise ConcurrentModificationError() from e

    def _get_department(self, department_id: UUID) -> Department:
        department = self.db.get(Department, department_id)
        if department is None:
            raise ResourceNotFoundError("Department", department_id)
        return department

    def _get_role(self, role_id: UUID) -> Role:
        role = self.db.get(Role, role_id)
        if role is None:
            raise ResourceNotFoundError("Role", role_id)
        return role

    def _ensure_email_free(self, email: str) -> None:
        if self.db.query(Employee.id).filter(Employee.email == email).first() is not None:
            raise DuplicateResourceError(f"An employee with email {email} already exists")
