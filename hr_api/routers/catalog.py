"""
Department and role endpoints. Both resources share one route layout,
built by ``build_catalog_router``.
"""
from typing import Callable, List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from hr_api.dependencies import get_department_service, get_role_service
from hr_api.routers.auth_deps import require_authenticated
from hr_api.schemas.catalog import CatalogItemCreate, CatalogItemResponse, CatalogItemUpdate
from hr_api.services.catalog_service import CatalogService


def build_catalog_router(prefix: str, tag: str, provider: Callable[..., CatalogService]) -> APIRouter:
    router = APIRouter(
        prefix=prefix,
        tags=[tag],
        dependencies=[Depends(require_authenticated)]
    )

    @router.post("", response_model=CatalogItemResponse, status_code=status.HTTP_201_CREATED)
    def create_item(data: CatalogItemCreate, service: CatalogService = Depends(provider)):
        return service.create(data.name)

    @router.get("", response_model=List[CatalogItemResponse])
    def list_items(service: CatalogService = Depends(provider)):
        return service.list_all()

    @router.get("/name/{name}", response_model=CatalogItemResponse)
    def find_by_name(name: str, service: CatalogService = Depends(provider)):
        return service.find_by_name(name)

    @router.get("/{item_id}", response_model=CatalogItemResponse)
    def get_item(item_id: UUID, service: CatalogService = Depends(provider)):
        return service.get(item_id)

    @router.put("/{item_id}", response_model=CatalogItemResponse)
    def update_item(item_id: UUID, data: CatalogItemUpdate, service: CatalogService = Depends(provider)):
        return service.update(item_id, data.name)

    @router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_item(item_id: UUID, service: CatalogService = Depends(provider)):
        service.delete(item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


departments_router = build_catalog_router("/departments", "departments", get_department_service)
roles_router = build_catalog_router("/roles", "roles", get_role_service)
