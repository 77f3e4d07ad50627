import pytest
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from appraisal_api.database import Base, get_db
from appraisal_api.main import app
from appraisal_api.models.band import Band
from appraisal_api.models.review import Review
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Fresh schema per test; services commit, so tables are dropped afterwards."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def reference_data(db_session):
    """Bands B1/B2 and reviews 1/2."""
    db_session.add_all([
        Band(band_id="B1", band_mul=0.10),
        Band(band_id="B2", band_mul=0.20),
        Review(rev_id=1, rev_mul=0.05),
        Review(rev_id=2, rev_mul=0.50),
    ])
    db_session.commit()

@pytest.fixture(scope="function")
def alice():
    """Request body for the standard test employee."""
    return {"empId": 1, "empName": "Alice", "review": 1, "band": "B1", "salary": 100000}

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
