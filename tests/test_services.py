import pytest

from app.core.exceptions import (
    ConcurrentModificationError,
    DuplicateEntryError,
    InsufficientBalanceError,
    InvalidDateRangeError,
    InvalidStateTransitionError,
    ValidationError,
    VacationRequestNotFoundError,
    WorkerNotFoundError,
)
from app.domain.value_objects import VacationStatus
from app.schemas.vacation_request import VacationRequestCreate
from app.schemas.worker import WorkerCreate
from tests.factories import REASON, days_ago, days_ahead, make_worker, restore_request


def worker_payload(**overrides) -> WorkerCreate:
    data = {
        "code": "EMP001",
        "cedula": "12345678",
        "name": "Ana Torres",
        "hire_date": days_ago(400),
        "area": "Engineering",
        "position": "Developer",
    }
    data.update(overrides)
    return WorkerCreate(**data)


def request_payload(worker_id: str, **overrides) -> VacationRequestCreate:
    data = {
        "worker_id": worker_id,
        "start_date": days_ahead(10),
        "end_date": days_ahead(15),
        "days": 5,
        "hours": 0,
        "type": "days",
        "reason": REASON,
    }
    data.update(overrides)
    return VacationRequestCreate(**data)


@pytest.fixture
def stored_worker(worker_repository):
    worker = make_worker(hired_days_ago=30)
    worker_repository.save(worker)
    return worker


class TestWorkerService:
    def test_create_worker(self, worker_service, worker_repository):
        worker = worker_service.create_worker(worker_payload())

        assert worker.seniority_years == 1
        assert worker_repository.find_by_id(worker.id.value) == worker

    def test_duplicate_code(self, worker_service):
        worker_service.create_worker(worker_payload())
        with pytest.raises(DuplicateEntryError) as exc_info:
            worker_service.create_worker(worker_payload(cedula="99999999"))
        assert exc_info.value.status_code == 409
        assert "code EMP001" in exc_info.value.message

    def test_duplicate_cedula(self, worker_service):
        worker_service.create_worker(worker_payload())
        with pytest.raises(DuplicateEntryError, match="cedula"):
            worker_service.create_worker(worker_payload(code="EMP002"))

    def test_reports_every_invalid_field(self, worker_service, worker_repository):
        payload = worker_payload(cedula="12AB", name="X", hire_date=days_ahead(5))

        with pytest.raises(ValidationError) as exc_info:
            worker_service.create_worker(payload)

        errors = exc_info.value.field_errors
        assert set(errors) == {"cedula", "name", "hireDate"}
        assert worker_repository.find_all() == []

    def test_get_and_delete(self, worker_service, stored_worker):
        assert worker_service.get_worker(stored_worker.id.value) == stored_worker

        worker_service.delete_worker(stored_worker.id.value)

        with pytest.raises(WorkerNotFoundError):
            worker_service.get_worker(stored_worker.id.value)
        with pytest.raises(WorkerNotFoundError):
            worker_service.delete_worker(stored_worker.id.value)

    def test_list_workers(self, worker_service):
        worker_service.create_worker(worker_payload(code="EMP002", cedula="22222222", name="Zoe"))
        worker_service.create_worker(worker_payload(name="Bruno"))
        assert [w.name.value for w in worker_service.list_workers()] == ["Bruno", "Zoe"]


class TestCreateVacationRequest:
    def test_creates_pending_request(self, vacation_request_service, stored_worker):
        request = vacation_request_service.create_vacation_request(
            request_payload(stored_worker.id.value)
        )

        assert request.status.value is VacationStatus.PENDING
        assert vacation_request_service.get_vacation_request(request.id.value) == request

    def test_unknown_worker(self, vacation_request_service):
        with pytest.raises(WorkerNotFoundError):
            vacation_request_service.create_vacation_request(request_payload("missing"))

    def test_days_type_requires_days(self, vacation_request_service, stored_worker):
        with pytest.raises(ValidationError, match="Days must be greater than 0"):
            vacation_request_service.create_vacation_request(
                request_payload(stored_worker.id.value, days=0)
            )

    def test_hours_type_requires_hours(self, vacation_request_service, stored_worker):
        with pytest.raises(ValidationError, match="Hours must be greater than 0"):
            vacation_request_service.create_vacation_request(
                request_payload(stored_worker.id.value, type="hours", days=0, hours=0)
            )

    def test_hours_request(self, vacation_request_service, stored_worker):
        request = vacation_request_service.create_vacation_request(
            request_payload(stored_worker.id.value, type="hours", days=0, hours=20)
        )
        assert request.total_time_in_days == 2.5

    def test_insufficient_balance(
        self, vacation_request_service, vacation_request_repository, stored_worker
    ):
        wid = stored_worker.id.value
        vacation_request_repository.save(restore_request(wid, status="approved", days=10))
        vacation_request_repository.save(restore_request(wid, status="pending", days=3))

        with pytest.raises(InsufficientBalanceError) as exc_info:
            vacation_request_service.create_vacation_request(request_payload(wid, days=3))
        assert exc_info.value.details["available_days"] == 2

        request = vacation_request_service.create_vacation_request(request_payload(wid, days=2))
        assert request.days.value == 2

    def test_start_must_precede_end(self, vacation_request_service, stored_worker):
        same_day = days_ahead(10)
        with pytest.raises(InvalidDateRangeError):
            vacation_request_service.create_vacation_request(
                request_payload(stored_worker.id.value, start_date=same_day, end_date=same_day)
            )

    def test_past_dates_rejected(self, vacation_request_service, stored_worker):
        with pytest.raises(ValidationError, match="in the past"):
            vacation_request_service.create_vacation_request(
                request_payload(
                    stored_worker.id.value, start_date=days_ago(5), end_date=days_ahead(2)
                )
            )


class TestTransitions:
    @pytest.fixture
    def pending(self, vacation_request_service, stored_worker):
        return vacation_request_service.create_vacation_request(
            request_payload(stored_worker.id.value)
        )

    def test_approve(self, vacation_request_service, pending):
        approved = vacation_request_service.approve_vacation_request(pending.id.value, "mgr-1")

        stored = vacation_request_service.get_vacation_request(pending.id.value)
        assert approved.status.value is VacationStatus.APPROVED
        assert stored.status.value is VacationStatus.APPROVED
        assert stored.approved_by == "mgr-1"
        assert stored.approved_at is not None

    def test_reject_then_approve_fails(self, vacation_request_service, pending):
        vacation_request_service.reject_vacation_request(pending.id.value, "mgr-2")

        with pytest.raises(InvalidStateTransitionError):
            vacation_request_service.approve_vacation_request(pending.id.value, "mgr-1")

        stored = vacation_request_service.get_vacation_request(pending.id.value)
        assert stored.status.value is VacationStatus.REJECTED
        assert stored.approved_by == "mgr-2"
        assert stored.approved_at is None

    def test_unknown_request(self, vacation_request_service):
        with pytest.raises(VacationRequestNotFoundError):
            vacation_request_service.approve_vacation_request("missing", "mgr-1")
        with pytest.raises(VacationRequestNotFoundError):
            vacation_request_service.reject_vacation_request("missing", "mgr-1")

    def test_lost_race_is_reported(
        self, vacation_request_service, vacation_request_repository, pending
    ):
        stale = vacation_request_repository.find_by_id(pending.id.value)
        vacation_request_service.approve_vacation_request(pending.id.value, "mgr-1")

        stale.reject("mgr-2")
        with pytest.raises(ConcurrentModificationError):
            vacation_request_repository.save(stale, expected_status=VacationStatus.PENDING)

    def test_delete(self, vacation_request_service, pending):
        vacation_request_service.delete_vacation_request(pending.id.value)
        with pytest.raises(VacationRequestNotFoundError):
            vacation_request_service.delete_vacation_request(pending.id.value)


class TestQueries:
    def test_list_and_filter(self, vacation_request_service, stored_worker):
        wid = stored_worker.id.value
        first = vacation_request_service.create_vacation_request(request_payload(wid, days=1))
        second = vacation_request_service.create_vacation_request(request_payload(wid, days=2))
        vacation_request_service.approve_vacation_request(first.id.value, "mgr-1")

        assert vacation_request_service.list_vacation_requests() == [second, first]
        assert vacation_request_service.list_vacation_requests("approved") == [first]
        assert vacation_request_service.list_vacation_requests(VacationStatus.PENDING) == [second]
        assert vacation_request_service.list_worker_vacation_requests(wid) == [second, first]

    def test_invalid_status_filter(self, vacation_request_service):
        with pytest.raises(ValidationError):
            vacation_request_service.list_vacation_requests("cancelled")

    def test_worker_requests_for_unknown_worker(self, vacation_request_service):
        with pytest.raises(WorkerNotFoundError):
            vacation_request_service.list_worker_vacation_requests("missing")

    def test_worker_balance(
        self, vacation_request_service, vacation_request_repository, worker_repository
    ):
        worker = make_worker(hired_days_ago=365 * 3 + 2)
        worker_repository.save(worker)
        wid = worker.id.value
        vacation_request_repository.save(restore_request(wid, status="approved", days=4))
        vacation_request_repository.save(restore_request(wid, status="pending", days=0, hours=16, type="hours"))
        vacation_request_repository.save(restore_request(wid, status="rejected", days=9))

        result = vacation_request_service.get_worker_vacation_balance(wid)

        assert result.worker == worker
        assert result.seniority_years == 3
        assert result.balance.total_days == 18
        assert result.balance.used_days == 4
        assert result.balance.pending_days == 2
        assert result.balance.available_days == 12

    def test_balance_for_unknown_worker(self, vacation_request_service):
        with pytest.raises(WorkerNotFoundError):
            vacation_request_service.get_worker_vacation_balance("missing")
