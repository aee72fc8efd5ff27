from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from uuid import UUID
from datetime import date

MAX_VACATION_DAYS = 365


class CatalogRef(BaseModel):
    """Compact department/role reference embedded in employee responses."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class EmployeeCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    department_id: UUID
    role_id: UUID
    hire_date: Optional[date] = None
    vacation_days: int = Field(0, ge=0, le=MAX_VACATION_DAYS)


class EmployeeUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    department_id: Optional[UUID] = None
    role_id: Optional[UUID] = None
    hire_date: Optional[date] = None
    vacation_days: Optional[int] = Field(None, ge=0, le=MAX_VACATION_DAYS)


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    email: str
    department: CatalogRef
    role: CatalogRef
    hire_date: date
    vacation_days: int
