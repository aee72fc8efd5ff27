from pydantic import BaseModel, ConfigDict
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from hr_api.models.leave import LeaveType


class LeaveRequestCreate(BaseModel):
    employee_id: UUID
    start_date: date
    end_date: date
    type: LeaveType


class LeaveRequestUpdate(BaseModel):
    start_date: date
    end_date: date
    type: LeaveType


class LeaveResponse(BaseModel):
    id: UUID
    employee_id: UUID
    start_date: date
    end_date: date
    type: LeaveType
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
