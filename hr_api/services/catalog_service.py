"""
Department and job-role catalogue.

Both are flat named lookups with identical rules, so one generic service
covers them.
"""
from typing import Generic, List, Type, TypeVar
from uuid import UUID

from hr_api.core.exceptions import DuplicateResourceError, ResourceNotFoundError, ValidationError
from hr_api.models.department import Department
from hr_api.models.employee import Employee
from hr_api.models.role import Role
from hr_api.services.base import BaseService

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100

T = TypeVar("T", Department, Role)


class CatalogService(BaseService, Generic[T]):
    model: Type[T]
    label: str
    employee_fk: str

    def create(self, name: str) -> T:
        name = self._clean_name(name)
        self._ensure_unique(name)
        item = self.model(name=name)
        self.db.add(item)
        self.commit()
        self.db.refresh(item)
        self.log_info(f"{self.label} created", item_name=name)
        return item

    def list_all(self) -> List[T]:
        return self.db.query(self.model).order_by(self.model.name).all()

    def get(self, item_id: UUID) -> T:
        item = self.db.get(self.model, item_id)
        if item is None:
            raise ResourceNotFoundError(self.label, item_id)
        return item

    def find_by_name(self, name: str) -> T:
        name = self._clean_name(name)
        item = self.db.query(self.model).filter(self.model.name == name).first()
        if item is None:
            raise ResourceNotFoundError(self.label, name)
        return item

    def update(self, item_id: UUID, name: str) -> T:
        name = self._clean_name(name)
        item = self.get(item_id)
        if item.name != name:
            self._ensure_unique(name)
            item.name = name
            self.commit()
            self.db.refresh(item)
        return item

    def delete(self, item_id: UUID) -> None:
        item = self.get(item_id)
        in_use = self.db.query(Employee.id).filter(
            getattr(Employee, self.employee_fk) == item.id
        ).first()
        if in_use is not None:
            raise ValidationError(f"{self.label} '{item.name}' is still assigned to employees")
        name = item.name
        self.db.delete(item)
        self.commit()
        self.log_info(f"{self.label} deleted", item_name=name)

    def _clean_name(self, name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError(f"{self.label} name must not be empty")
        if len(name) < NAME_MIN_LENGTH:
            raise ValidationError(f"{self.label} name must be at least {NAME_MIN_LENGTH} characters")
        if len(name) > NAME_MAX_LENGTH:
            raise ValidationError(f"{self.label} name must be at most {NAME_MAX_LENGTH} characters")
        return name

    def _ensure_unique(self, name: str) -> None:
        if self.db.query(self.model.id).filter(self.model.name == name).first() is not None:
            raise DuplicateResourceError(f"{self.label} '{name}' already exists")


class DepartmentService(CatalogService[Department]):
    model = Department
    label = "Department"
    employee_fk = "department_id"


class RoleService(CatalogService[Role]):
    model = Role
    label = "Role"
    employee_fk = "role_id"
