from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.pool import StaticPool

from app.core.exceptions import ConcurrentModificationError, DuplicateEntryError
from app.db.init_db import drop_db, init_db
from app.domain.value_objects import VacationStatus
from tests.factories import days_ago, make_request, make_worker, restore_request


class TestWorkerRepository:
    def test_save_and_find(self, worker_repository):
        worker = make_worker()
        worker_repository.save(worker)

        found = worker_repository.find_by_id(worker.id.value)

        assert found == worker
        assert found.code.value == "EMP001"
        assert found.hire_date.value == worker.hire_date.value
        assert found.hire_date.value.tzinfo is not None

    def test_find_by_business_keys(self, worker_repository):
        worker = make_worker(code="EMP777", cedula="77777777")
        worker_repository.save(worker)

        assert worker_repository.find_by_code("EMP777") == worker
        assert worker_repository.find_by_cedula("77777777") == worker
        assert worker_repository.find_by_code("NOPE") is None
        assert worker_repository.find_by_id("missing") is None

    def test_find_all_ordered_by_name(self, worker_repository):
        for code, cedula, name in [
            ("EMP003", "30000000", "Carla"),
            ("EMP001", "10000000", "Andres"),
            ("EMP002", "20000000", "Beatriz"),
        ]:
            worker_repository.save(make_worker(code=code, cedula=cedula, name=name))

        names = [w.name.value for w in worker_repository.find_all()]
        assert names == ["Andres", "Beatriz", "Carla"]

    def test_save_is_upsert(self, worker_repository):
        worker = make_worker()
        worker_repository.save(worker)
        worker_repository.save(worker)

        assert len(worker_repository.find_all()) == 1

    def test_unique_code_enforced(self, worker_repository):
        worker_repository.save(make_worker(code="EMP001", cedula="11111111"))
        with pytest.raises(DuplicateEntryError):
            worker_repository.save(make_worker(code="EMP001", cedula="22222222"))

    def test_delete(self, worker_repository):
        worker = make_worker()
        worker_repository.save(worker)

        assert worker_repository.delete(worker.id.value) is True
        assert worker_repository.find_by_id(worker.id.value) is None
        assert worker_repository.delete(worker.id.value) is False


class TestVacationRequestRepository:
    def test_save_and_find(self, vacation_request_repository):
        request = make_request(make_worker(), days=3)
        vacation_request_repository.save(request)

        found = vacation_request_repository.find_by_id(request.id.value)

        assert found == request
        assert found.days.value == 3
        assert found.status.value is VacationStatus.PENDING
        assert found.created_at == request.created_at
        assert found.approved_by is None

    def test_past_requests_remain_loadable(self, vacation_request_repository):
        request = restore_request(
            "worker-1",
            status="approved",
            start=days_ago(60),
            end=days_ago(50),
            approved_at=days_ago(70),
            approved_by="mgr-1",
        )
        vacation_request_repository.save(request)

        found = vacation_request_repository.find_by_id(request.id.value)

        assert found.status.value is VacationStatus.APPROVED
        assert found.approved_by == "mgr-1"
        assert found.start_date.value < datetime.now(timezone.utc)

    def test_lists_are_newest_first(self, vacation_request_repository):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        older = restore_request("w-1", created_at=base)
        newer = restore_request("w-1", created_at=base + timedelta(hours=1), status="approved")
        other = restore_request("w-2", created_at=base + timedelta(hours=2))
        for request in (older, newer, other):
            vacation_request_repository.save(request)

        assert vacation_request_repository.find_all() == [other, newer, older]
        assert vacation_request_repository.find_by_worker_id("w-1") == [newer, older]
        assert vacation_request_repository.find_by_status(VacationStatus.PENDING) == [other, older]
        assert vacation_request_repository.find_by_status("approved") == [newer]

    def test_transition_is_persisted(self, vacation_request_repository):
        request = make_request(make_worker())
        vacation_request_repository.save(request)

        request.reject("mgr-2")
        vacation_request_repository.save(request, expected_status=VacationStatus.PENDING)

        found = vacation_request_repository.find_by_id(request.id.value)
        assert found.status.value is VacationStatus.REJECTED
        assert found.approved_by == "mgr-2"
        assert found.rejected_at is not None

    def test_conditional_save_detects_lost_race(self, vacation_request_repository):
        request = make_request(make_worker())
        vacation_request_repository.save(request)

        first = vacation_request_repository.find_by_id(request.id.value)
        second = vacation_request_repository.find_by_id(request.id.value)

        first.approve("mgr-1")
        vacation_request_repository.save(first, expected_status=VacationStatus.PENDING)

        second.reject("mgr-2")
        with pytest.raises(ConcurrentModificationError):
            vacation_request_repository.save(second, expected_status=VacationStatus.PENDING)

        stored = vacation_request_repository.find_by_id(request.id.value)
        assert stored.status.value is VacationStatus.APPROVED
        assert stored.approved_by == "mgr-1"

    def test_delete(self, vacation_request_repository):
        request = make_request(make_worker())
        vacation_request_repository.save(request)

        assert vacation_request_repository.delete(request.id.value) is True
        assert vacation_request_repository.find_by_id(request.id.value) is None
        assert vacation_request_repository.delete(request.id.value) is False


class TestSchemaLifecycle:
    def test_init_and_drop(self):
        engine = create_engine("sqlite://", poolclass=StaticPool)

        init_db(engine)
        assert {"workers", "vacation_requests"} <= set(inspect(engine).get_table_names())

        init_db(engine)

        drop_db(engine)
        assert inspect(engine).get_table_names() == []
        engine.dispose()
