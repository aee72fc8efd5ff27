from datetime import date
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from hr_api.dependencies import get_leave_service
from hr_api.routers.auth_deps import require_authenticated
from hr_api.schemas.leave import LeaveRequestCreate, LeaveRequestUpdate, LeaveResponse
from hr_api.services.leave_service import LeaveService

router = APIRouter(
    prefix="/leaves",
    tags=["leaves"],
    dependencies=[Depends(require_authenticated)]
)


@router.post("", response_model=LeaveResponse, status_code=status.HTTP_201_CREATED)
def request_leave(data: LeaveRequestCreate, service: LeaveService = Depends(get_leave_service)):
    return service.request_leave(data.employee_id, data.start_date, data.end_date, data.type)


@router.get("/range", response_model=List[LeaveResponse])
def list_by_date_range(
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    service: LeaveService = Depends(get_leave_service)
):
    return service.list_by_date_range(start_date, end_date)


@router.get("/employee/{employee_id}", response_model=List[LeaveResponse])
def list_by_employee(employee_id: UUID, service: LeaveService = Depends(get_leave_service)):
    return service.list_by_employee(employee_id)


@router.get("/{leave_id}", response_model=LeaveResponse)
def get_leave(leave_id: UUID, service: LeaveService = Depends(get_leave_service)):
    return service.get_leave(leave_id)


@router.put("/{leave_id}", response_model=LeaveResponse)
def update_leave(
    leave_id: UUID,
    data: LeaveRequestUpdate,
    service: LeaveService = Depends(get_leave_service)
):
    return service.update_leave(leave_id, data.start_date, data.end_date, data.type)


@router.delete("/{leave_id}", status_code=status.HTTP_204_NO_CONTENT)
def cancel_leave(leave_id: UUID, service: LeaveService = Depends(get_leave_service)):
    service.cancel_leave(leave_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
