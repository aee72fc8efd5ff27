from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from hr_api.dependencies import get_employee_service
from hr_api.routers.auth_deps import require_admin_or_hr, require_authenticated
from hr_api.schemas.employee import MAX_VACATION_DAYS, EmployeeCreate, EmployeeResponse, EmployeeUpdate
from hr_api.services.employee_service import EmployeeService

router = APIRouter(
    prefix="/employees",
    tags=["employees"],
    dependencies=[Depends(require_authenticated)]
)


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(data: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)):
    return service.create_employee(**data.model_dump())


@router.get("", response_model=List[EmployeeResponse])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return service.list_employees()


@router.get("/department/{department_id}", response_model=List[EmployeeResponse])
def list_by_department(department_id: UUID, service: EmployeeService = Depends(get_employee_service)):
    return service.list_by_department(department_id)


@router.get("/role/{role_id}", response_model=List[EmployeeResponse])
def list_by_role(role_id: UUID, service: EmployeeService = Depends(get_employee_service)):
    return service.list_by_role(role_id)


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: UUID, service: EmployeeService = Depends(get_employee_service)):
    return service.get_employee(employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: UUID,
    data: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service)
):
    return service.update_employee(employee_id, **data.model_dump(exclude_unset=True))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: UUID, service: EmployeeService = Depends(get_employee_service)):
    service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Vacation ledger ---

@router.put(
    "/{employee_id}/vacation",
    response_model=EmployeeResponse,
    dependencies=[Depends(require_admin_or_hr)]
)
def take_vacation(
    employee_id: UUID,
    days: int = Query(..., le=MAX_VACATION_DAYS, description="Days to debit from the balance"),
    service: EmployeeService = Depends(get_employee_service)
):
    return service.take_vacation(employee_id, days)


@router.put("/{employee_id}/vacation/add", response_model=EmployeeResponse)
def add_vacation_days(
    employee_id: UUID,
    days: int = Query(..., le=MAX_VACATION_DAYS, description="Days to credit; non-positive values are ignored"),
    service: EmployeeService = Depends(get_employee_service)
):
    return service.add_vacation_days(employee_id, days)
