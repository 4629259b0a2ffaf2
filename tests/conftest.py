import os

# Must be set before the application settings are first imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.init_db import drop_db, init_db
from app.db.session import get_db
from app.domain.services.vacation_calculation_service import VacationCalculationService
from app.main import app
from app.repositories.vacation_request_repository import SqlAlchemyVacationRequestRepository
from app.repositories.worker_repository import SqlAlchemyWorkerRepository
from app.services.vacation_request_service import VacationRequestService
from app.services.worker_service import WorkerService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def worker_repository(db_session):
    return SqlAlchemyWorkerRepository(db_session)


@pytest.fixture
def vacation_request_repository(db_session):
    return SqlAlchemyVacationRequestRepository(db_session)


@pytest.fixture
def worker_service(worker_repository):
    return WorkerService(worker_repository)


@pytest.fixture
def vacation_request_service(worker_repository, vacation_request_repository):
    return VacationRequestService(
        worker_repository,
        vacation_request_repository,
        VacationCalculationService(),
    )


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
