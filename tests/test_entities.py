from datetime import datetime, timedelta, timezone

import pytest

from app.core.exceptions import InvalidStateTransitionError, ValidationError
from app.domain.entities.vacation_request import VacationRequest
from app.domain.entities.worker import Worker
from app.domain.value_objects import VacationStatus
from tests.factories import REASON, days_ago, make_request, make_worker, restore_request

HIRED = datetime(2020, 1, 1, tzinfo=timezone.utc)


def worker_hired_at(moment: datetime) -> Worker:
    return Worker.create("EMP100", "87654321", "Luis Mora", moment, "Sales", "Manager")


class TestWorker:
    def test_create_generates_id_and_trims(self):
        worker = Worker.create(" EMP001 ", "12345678", "  Ana Torres ", HIRED, " HR ", " Analyst ")
        assert worker.id.value
        assert worker.code.value == "EMP001"
        assert worker.name.value == "Ana Torres"
        assert worker.area.value == "HR"
        assert worker.position.value == "Analyst"

    def test_create_rejects_future_hire_date(self):
        with pytest.raises(ValidationError, match="future"):
            make_worker(hired_days_ago=-2)

    def test_seniority_exactly_one_year(self):
        worker = worker_hired_at(HIRED)
        assert worker.seniority_years_at(HIRED + timedelta(days=365)) == 1

    def test_seniority_rounds_partial_days_up(self):
        worker = worker_hired_at(HIRED)
        assert worker.seniority_years_at(HIRED + timedelta(days=364)) == 0
        assert worker.seniority_years_at(HIRED + timedelta(days=364, seconds=1)) == 1

    def test_seniority_many_years(self):
        worker = worker_hired_at(HIRED)
        assert worker.seniority_years_at(HIRED + timedelta(days=365 * 10 + 3)) == 10

    def test_seniority_now(self):
        assert make_worker(hired_days_ago=365 * 2 + 1).seniority_years == 2
        assert make_worker(hired_days_ago=10).seniority_years == 0

    def test_equality_by_identity(self):
        worker = make_worker()
        same = Worker.restore(
            worker.id.value, "OTHER1", "99999999", "Someone Else", HIRED, "Ops", "Lead"
        )
        assert worker == same
        assert worker != make_worker()


class TestVacationRequestCreate:
    def test_new_request_is_pending(self):
        request = make_request(make_worker())
        assert request.status.value is VacationStatus.PENDING
        assert request.created_at.tzinfo is not None
        assert request.approved_at is None
        assert request.rejected_at is None
        assert request.approved_by is None

    def test_total_time_in_days(self):
        worker = make_worker()
        assert make_request(worker, days=4).total_time_in_days == 4
        assert make_request(worker, days=0, hours=40, type="hours").total_time_in_days == 5.0
        assert make_request(worker, days=0, hours=4, type="hours").total_time_in_days == 0.5

    def test_past_start_date_rejected(self):
        worker = make_worker()
        with pytest.raises(ValidationError, match="start date cannot be in the past"):
            VacationRequest.create(
                worker.id.value, days_ago(3), days_ago(1), 2, 0, "days", REASON
            )

    def test_restore_accepts_past_dates(self):
        request = restore_request(
            "worker-1", status="approved", start=days_ago(40), end=days_ago(30),
            approved_at=days_ago(45), approved_by="mgr-1",
        )
        assert request.start_date.value < request.end_date.value
        assert request.status.value is VacationStatus.APPROVED


class TestVacationRequestTransitions:
    def test_approve_sets_fields(self):
        request = make_request(make_worker())
        request.approve("mgr-1")

        assert request.status.value is VacationStatus.APPROVED
        assert request.approved_at is not None
        assert request.approved_by == "mgr-1"
        assert request.rejected_at is None

    def test_reject_records_actor_in_approved_by(self):
        request = make_request(make_worker())
        request.reject("mgr-2")

        assert request.status.value is VacationStatus.REJECTED
        assert request.rejected_at is not None
        assert request.approved_at is None
        assert request.approved_by == "mgr-2"

    def test_second_transition_fails_and_leaves_state(self):
        request = make_request(make_worker())
        request.approve("mgr-1")
        approved_at = request.approved_at

        with pytest.raises(InvalidStateTransitionError, match="Only pending requests can be rejected"):
            request.reject("mgr-2")

        assert request.status.value is VacationStatus.APPROVED
        assert request.approved_at == approved_at
        assert request.approved_by == "mgr-1"
        assert request.rejected_at is None

    def test_approve_twice_fails(self):
        request = make_request(make_worker())
        request.reject("mgr-2")
        with pytest.raises(InvalidStateTransitionError, match="Only pending requests can be approved"):
            request.approve("mgr-1")
        assert request.status.value is VacationStatus.REJECTED

    def test_blank_actor_rejected(self):
        request = make_request(make_worker())
        with pytest.raises(ValidationError):
            request.approve("   ")
        assert request.status.is_pending
