from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from uuid import UUID
from datetime import datetime


class CatalogItemBase(BaseModel):
    """Base schema for department and role data."""
    # Length rules are enforced on the trimmed value by the service
    name: str = Field(..., max_length=200)


class CatalogItemCreate(CatalogItemBase):
    pass


class CatalogItemUpdate(CatalogItemBase):
    pass


class CatalogItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    created_at: Optional[datetime] = None


class DepartmentReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    department_name: str
    employee_count: int
    leave_count: int
