import io
import os

# Keep the app's own engine off disk; tests use test_engine below
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from PIL import Image  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from lilian.database import get_session  # noqa: E402
from lilian.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

# sqlite:///:memory: with StaticPool so every session (including the ones the
# app opens through get_session) shares one database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def override_get_session():
    """Override session to use test engine"""
    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="session", scope="function")
def session_fixture():
    """Provide a test database session on freshly created tables"""
    from lilian.models.content import Content  # noqa: F401
    from lilian.models.donation import Donation  # noqa: F401
    from lilian.models.member import Member  # noqa: F401

    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session

    # Drop everything so each test starts empty
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Provide a test client with overridden database session

    The override is installed before TestClient() so the app never touches
    its own engine for request handling.
    """
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_image():
    """Factory for encoded test images of a given size and format."""

    def _make(width: int, height: int, fmt: str = "PNG", mode: str = "RGB", color=(200, 40, 90)) -> bytes:
        if mode == "RGBA":
            color = tuple(color) + (128,)
        img = Image.new(mode, (width, height), color)
        buf = io.BytesIO()
        img.save(buf, format=fmt)
        return buf.getvalue()

    return _make
