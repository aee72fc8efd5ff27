"""
Service providers for route handlers.

Every service is built per request from the request-scoped session, so
handlers receive their collaborators explicitly through ``Depends``.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from hr_api.database import get_db
from hr_api.services.auth import AuthService
from hr_api.services.catalog_service import DepartmentService, RoleService
from hr_api.services.employee_service import EmployeeService
from hr_api.services.leave_service import LeaveService
from hr_api.services.report_service import ReportService
from hr_api.services.token_service import TokenService, get_token_service


def get_auth_service(
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(db, tokens)


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(db)


def get_leave_service(db: Session = Depends(get_db)) -> LeaveService:
    return LeaveService(db)


def get_department_service(db: Session = Depends(get_db)) -> DepartmentService:
    return DepartmentService(db)


def get_role_service(db: Session = Depends(get_db)) -> RoleService:
    return RoleService(db)


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(db)
