import pytest
from fastapi import status

from hr_api.core.exceptions import DuplicateResourceError, ResourceNotFoundError, ValidationError
from hr_api.services.catalog_service import DepartmentService, RoleService


def test_create_trims_and_finds_by_name(db_session):
    service = DepartmentService(db_session)
    created = service.create("  Finance  ")
    assert created.name == "Finance"
    assert service.find_by_name("Finance").id == created.id


@pytest.mark.parametrize("name", ["", "   ", "x", "y" * 101])
def test_invalid_names_are_rejected(db_session, name):
    with pytest.raises(ValidationError):
        RoleService(db_session).create(name)


def test_duplicate_name_is_rejected(db_session, department):
    with pytest.raises(DuplicateResourceError):
        DepartmentService(db_session).create("Engineering")


def test_rename(db_session, role):
    service = RoleService(db_session)
    assert service.update(role.id, "Senior Developer").name == "Senior Developer"
    with pytest.raises(ResourceNotFoundError):
        service.find_by_name("Developer")


def test_delete_in_use_is_refused(db_session, employee, department):
    with pytest.raises(ValidationError):
        DepartmentService(db_session).delete(department.id)


def test_delete_unused(db_session):
    service = RoleService(db_session)
    item = service.create("Intern")
    service.delete(item.id)
    with pytest.raises(ResourceNotFoundError):
        service.get(item.id)


@pytest.mark.parametrize("resource", ["departments", "roles"])
def test_catalog_crud_over_http(client, admin_headers, resource):
    base = f"/api/{resource}"

    response = client.post(base, json={"name": "Operations"}, headers=admin_headers)
    assert response.status_code == status.HTTP_201_CREATED
    item_id = response.json()["id"]

    response = client.post(base, json={"name": "Operations"}, headers=admin_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["code"] == "DUPLICATE_RESOURCE"

    response = client.get(f"{base}/name/Operations", headers=admin_headers)
    assert response.json()["id"] == item_id

    response = client.put(f"{base}/{item_id}", json={"name": "Ops"}, headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Ops"

    assert [i["name"] for i in client.get(base, headers=admin_headers).json()] == ["Ops"]

    response = client.delete(f"{base}/{item_id}", headers=admin_headers)
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"{base}/{item_id}", headers=admin_headers).status_code == status.HTTP_404_NOT_FOUND


def test_catalog_requires_authentication(client):
    assert client.get("/api/roles").status_code == status.HTTP_401_UNAUTHORIZED
