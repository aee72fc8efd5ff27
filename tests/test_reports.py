import uuid
from datetime import date
from fastapi import status

from hr_api.models.department import Department
from hr_api.models.leave import Leave, LeaveType
from hr_api.services.report_service import ReportService


def test_department_reports(db_session, employee, department):
    db_session.add(Department(name="Legal"))
    db_session.add(Leave(
        employee_id=employee.id,
        start_date=date(2024, 12, 1),
        end_date=date(2024, 12, 3),
        type=LeaveType.SICK,
    ))
    db_session.commit()

    reports = ReportService(db_session).department_reports()
    by_name = {r.department_name: r for r in reports}
    assert by_name["Engineering"].employee_count == 1
    assert by_name["Engineering"].leave_count == 1
    assert by_name["Legal"].employee_count == 0
    assert by_name["Legal"].leave_count == 0


def test_department_report_over_http(client, admin_headers, employee, department):
    response = client.get(f"/api/reports/departments/{department.id}", headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"department_name": "Engineering", "employee_count": 1, "leave_count": 0}


def test_unknown_department_report(client, admin_headers):
    response = client.get(f"/api/reports/departments/{uuid.uuid4()}", headers=admin_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
