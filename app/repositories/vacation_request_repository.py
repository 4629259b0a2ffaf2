"""
Vacation request repository backed by SQLAlchemy.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.domain.entities.vacation_request import VacationRequest
from app.domain.repositories import VacationRequestRepository
from app.domain.value_objects import VacationStatus
from app.models.vacation_request import VacationRequestModel
from app.repositories.base.base_repository import BaseRepository

NEWEST_FIRST = ["-created_at"]


class SqlAlchemyVacationRequestRepository(
    BaseRepository[VacationRequestModel], VacationRequestRepository
):
    """Stores VacationRequest aggregates in the ``vacation_requests`` table."""

    def __init__(self, db: Session):
        super().__init__(VacationRequestModel, db)

    # ==================== Mapping ====================

    @staticmethod
    def to_columns(vacation_request: VacationRequest) -> dict:
        return {
            "worker_id": vacation_request.worker_id.value,
            "start_date": vacation_request.start_date.value,
            "end_date": vacation_request.end_date.value,
            "days": vacation_request.days.value,
            "hours": vacation_request.hours.value,
            "type": vacation_request.type.value,
            "reason": vacation_request.reason.value,
            "status": vacation_request.status.value,
            "created_at": vacation_request.created_at,
            "approved_at": vacation_request.approved_at,
            "rejected_at": vacation_request.rejected_at,
            "approved_by": vacation_request.approved_by,
        }

    @staticmethod
    def to_entity(model: VacationRequestModel) -> VacationRequest:
        return VacationRequest.restore(
            id=model.id,
            worker_id=model.worker_id,
            start_date=model.start_date,
            end_date=model.end_date,
            days=model.days,
            hours=model.hours,
            type=model.type,
            reason=model.reason,
            status=model.status,
            created_at=model.created_at,
            approved_at=model.approved_at,
            rejected_at=model.rejected_at,
            approved_by=model.approved_by,
        )

    def _to_entities(self, models: List[VacationRequestModel]) -> List[VacationRequest]:
        return [self.to_entity(model) for model in models]

    # ==================== VacationRequestRepository ====================

    def save(
        self,
        vacation_request: VacationRequest,
        expected_status: Optional[VacationStatus] = None,
    ) -> VacationRequest:
        columns = self.to_columns(vacation_request)

        if expected_status is None:
            self.upsert(VacationRequestModel(id=vacation_request.id.value, **columns))
        else:
            self.update_where(
                vacation_request.id.value,
                guard={"status": VacationStatus(expected_status)},
                data=columns,
            )
        return vacation_request

    def find_by_id(self, vacation_request_id: str) -> Optional[VacationRequest]:
        model = self.find_model_by_id(vacation_request_id)
        return self.to_entity(model) if model else None

    def find_by_worker_id(self, worker_id: str) -> List[VacationRequest]:
        return self._to_entities(
            self.find_models({"worker_id": worker_id}, order_by=NEWEST_FIRST)
        )

    def find_by_status(self, status: VacationStatus) -> List[VacationRequest]:
        return self._to_entities(
            self.find_models({"status": VacationStatus(status)}, order_by=NEWEST_FIRST)
        )

    def find_all(self) -> List[VacationRequest]:
        return self._to_entities(self.find_models(order_by=NEWEST_FIRST))
