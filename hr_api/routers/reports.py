from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from hr_api.dependencies import get_report_service
from hr_api.routers.auth_deps import require_admin
from hr_api.schemas.catalog import DepartmentReportResponse
from hr_api.services.report_service import ReportService

router = APIRouter(
    prefix="/reports",
    tags=["reports"],
    dependencies=[Depends(require_admin)]
)


@router.get("/departments", response_model=List[DepartmentReportResponse])
def department_reports(service: ReportService = Depends(get_report_service)):
    """Headcount and leave totals for every department."""
    return service.department_reports()


@router.get("/departments/{department_id}", response_model=DepartmentReportResponse)
def department_report(department_id: UUID, service: ReportService = Depends(get_report_service)):
    return service.department_report(department_id)
