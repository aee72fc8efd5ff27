# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import user, department, role, employee, leave

# Explicit class exports for cleaner imports
from .user import User
from .department import Department
from .role import Role
from .employee import Employee
from .leave import Leave, LeaveType

__all__ = [
    "User",
    "Department",
    "Role",
    "Employee",
    "Leave",
    "LeaveType",
]
