from fastapi import APIRouter
from hr_api.routers import auth, employees, leaves, reports
from hr_api.routers.catalog import departments_router, roles_router

# Centralized API router hub
# Routers are aggregated here, and main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(employees.router, tags=["Employees"])
api_router.include_router(leaves.router, tags=["Leaves"])
api_router.include_router(departments_router, tags=["Departments"])
api_router.include_router(roles_router, tags=["Roles"])
api_router.include_router(reports.router, tags=["Reports"])
