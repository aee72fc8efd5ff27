import pytest
import os
from datetime import date, timedelta
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_DEFAULT_USERS"] = "false"

from hr_api.database import Base, get_db
from hr_api.main import app
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# pysqlite does not emit BEGIN itself, which breaks SAVEPOINT-based test
# isolation; let SQLAlchemy control transactions (documented SQLite recipe).
@event.listens_for(engine, "connect")
def _sqlite_connect(dbapi_connection, connection_record):
    dbapi_connection.isolation_level = None


@event.listens_for(engine, "begin")
def _sqlite_begin(conn):
    conn.exec_driver_sql("BEGIN")
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEFAULT_PASSWORD = "password123"


@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection, join_transaction_mode="create_savepoint")

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def make_user(db_session):
    """Factory for stored credentials."""
    from hr_api.core.security import get_password_hash
    from hr_api.models.user import User

    def _make_user(username, role="ROLE_USER", password=DEFAULT_PASSWORD, enabled=True):
        user = User(
            username=username,
            hashed_password=get_password_hash(password),
            role=role,
            enabled=enabled,
        )
        db_session.add(user)
        db_session.commit()
        return user
    return _make_user


@pytest.fixture(scope="function")
def admin_user(make_user):
    return make_user("admin", role="ROLE_ADMIN")


@pytest.fixture(scope="function")
def regular_user(make_user):
    return make_user("employee", role="ROLE_USER")


@pytest.fixture(scope="function")
def token_service():
    from hr_api.services.token_service import get_token_service
    return get_token_service()


@pytest.fixture(scope="function")
def auth_headers(token_service):
    """Helper fixture building a Bearer header for a stored user."""
    def _auth_headers(user):
        return {"Authorization": f"Bearer {token_service.issue(user.username, {'role': user.role})}"}
    return _auth_headers


@pytest.fixture(scope="function")
def admin_headers(admin_user, auth_headers):
    return auth_headers(admin_user)


@pytest.fixture(scope="function")
def user_headers(regular_user, auth_headers):
    return auth_headers(regular_user)


@pytest.fixture(scope="function")
def department(db_session):
    from hr_api.models.department import Department
    dept = Department(name="Engineering")
    db_session.add(dept)
    db_session.commit()
    return dept


@pytest.fixture(scope="function")
def role(db_session):
    from hr_api.models.role import Role
    job_role = Role(name="Developer")
    db_session.add(job_role)
    db_session.commit()
    return job_role


@pytest.fixture(scope="function")
def employee(db_session, department, role):
    from hr_api.models.employee import Employee
    emp = Employee(
        first_name="Ana",
        last_name="Lopez",
        email="ana.lopez@example.com",
        department=department,
        role=role,
        hire_date=date(2020, 1, 15),
        vacation_days=20,
    )
    db_session.add(emp)
    db_session.commit()
    return emp


@pytest.fixture(scope="function")
def future():
    """Date helper: future(n) is n days from today."""
    def _future(days):
        return date.today() + timedelta(days=days)
    return _future


@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
