import base64
import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from app.main import app
from app.db.session import get_db
from app.models import Base
from app.models.user import ADMINISTRATOR, CUSTOMER
from app.services.identity import IdentityService

# One in-memory database shared by every session in a test
test_engine = create_engine(
    "sqlite+pysqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    future=True,
    echo=False,
)
TestSessionLocal = sessionmaker(bind=test_engine, autocommit=False, autoflush=False, future=True)


@event.listens_for(test_engine, "connect")
def _enable_foreign_keys(dbapi_connection, _connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


ADMIN_CREDENTIALS = ("admin", "Adm1n-pass!")
CUSTOMER_CREDENTIALS = ("reader", "Cust0mer-pass!")


def basic_auth(username: str, password: str) -> dict[str, str]:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


def override_get_db():
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_test_database():
    """Create tables before each test and drop them after."""
    Base.metadata.create_all(bind=test_engine)
    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def test_client():
    """Create a test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def users():
    """An administrator and a customer, committed and detached."""
    db = TestSessionLocal()
    try:
        _ = IdentityService.create_user(
            db, *ADMIN_CREDENTIALS, roles=[ADMINISTRATOR], email="admin@bookstore.test"
        )
        _ = IdentityService.create_user(db, *CUSTOMER_CREDENTIALS, roles=[CUSTOMER])
    finally:
        db.close()
    return {"admin": ADMIN_CREDENTIALS, "customer": CUSTOMER_CREDENTIALS}


@pytest.fixture
def make_auth():
    """Build HTTP Basic headers for any username/password."""
    return basic_auth


@pytest.fixture
def admin_headers(users):
    """HTTP Basic headers for the administrator."""
    return basic_auth(*users["admin"])


@pytest.fixture
def customer_headers(users):
    """HTTP Basic headers for the customer."""
    return basic_auth(*users["customer"])


@pytest.fixture
def sample_author(test_client, admin_headers):
    """Create a sample author through the API."""
    response = test_client.post(
        "/api/authors",
        json={"first_name": "Frank", "last_name": "Herbert"},
        headers=admin_headers,
    )
    assert response.status_code == 201, f"Failed to create sample author: {response.text}"
    return response.json()


@pytest.fixture
def sample_book(test_client, sample_author):
    """Create a sample book through the API."""
    book_data = {
        "title": "Dune",
        "year": 1965,
        "isbn": "9780441013593",
        "summary": "Desert planet, spice, and a reluctant messiah.",
        "image": "covers/dune.jpg",
        "price": 9.99,
        "author_id": sample_author["id"],
    }
    response = test_client.post("/api/books", json=book_data)
    assert response.status_code == 201, f"Failed to create sample book: {response.text}"
    return response.json()


@pytest.fixture
def sample_author_model(db_session):
    """Create a sample author model for repository tests."""
    from app.models.author import Author

    author = Author(first_name="Ursula", last_name="Le Guin")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book_model(db_session, sample_author_model):
    """Create a sample book model for repository tests."""
    from decimal import Decimal
    from app.models.book import Book

    book = Book(
        title="The Left Hand of Darkness",
        year=1969,
        isbn="9780441478125",
        price=Decimal("12.50"),
        author_id=sample_author_model.id,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book
