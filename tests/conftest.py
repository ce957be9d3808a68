"""
Pytest configuration and fixtures for Admin Portal API tests.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from admin_portal.auth import get_password_hash, get_token_service
from admin_portal.database import Base, get_db
from admin_portal.limiter import limiter
from admin_portal.main import app
from admin_portal.models.user import User
from admin_portal.services.exceptions import MailDeliveryError, StorageError
from admin_portal.services.mailer import get_mailer
from admin_portal.services.storage import get_storage

# Disable rate limiting for tests
limiter.enabled = False

# Use in-memory SQLite for tests with shared connection
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Global session for sharing across requests
_test_session = None


def get_test_db():
    """Get the shared test database session."""
    yield _test_session


class FakeMailer:
    """Records outgoing mail instead of calling the email API."""

    def __init__(self):
        self.sent = []
        self.fail = False

    def send_invite(self, to, link):
        if self.fail:
            raise MailDeliveryError()
        self.sent.append((to, link))

    @property
    def last_token(self):
        return self.sent[-1][1].rsplit("/", 1)[-1]


class FakeStorage:
    """In-memory stand-in for the image storage API."""

    def __init__(self):
        self.uploaded = []
        self.destroyed = []
        self.fail = False

    def upload(self, file):
        if self.fail:
            raise StorageError()
        public_id = f"adminportal/img{len(self.uploaded) + 1}"
        self.uploaded.append(file)
        return {"url": f"https://res.cloudinary.com/demo/image/upload/{public_id}.jpg", "public_id": public_id}

    def destroy(self, public_id):
        if self.fail:
            raise StorageError()
        self.destroyed.append(public_id)
        return "ok"


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    global _test_session

    Base.metadata.create_all(bind=engine)
    _test_session = TestingSessionLocal()
    app.dependency_overrides[get_db] = get_test_db

    yield _test_session

    app.dependency_overrides.clear()
    _test_session.close()
    _test_session = None
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def mailer(db):
    fake = FakeMailer()
    app.dependency_overrides[get_mailer] = lambda: fake
    return fake


@pytest.fixture(scope="function")
def storage(db):
    fake = FakeStorage()
    app.dependency_overrides[get_storage] = lambda: fake
    return fake


@pytest.fixture(scope="function")
def client(db):
    """Create an anonymous test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def test_user(db):
    """Create an active admin user."""
    user = User(
        email="admin@example.com",
        username="admin",
        role="admin",
        status="active",
        hashed_password=get_password_hash("testpassword123"),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture(scope="function")
def session_token(test_user):
    """Get a session token for the test user."""
    return get_token_service().issue_session_token(test_user.id)


@pytest.fixture(scope="function")
def auth_client(client, session_token):
    """Test client carrying the session cookie."""
    client.cookies.set("token", session_token)
    return client
