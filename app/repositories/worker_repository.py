"""
Worker repository backed by SQLAlchemy.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.domain.entities.worker import Worker
from app.domain.repositories import WorkerRepository
from app.models.worker import WorkerModel
from app.repositories.base.base_repository import BaseRepository


class SqlAlchemyWorkerRepository(BaseRepository[WorkerModel], WorkerRepository):
    """Stores Worker aggregates in the ``workers`` table."""

    def __init__(self, db: Session):
        super().__init__(WorkerModel, db)

    # ==================== Mapping ====================

    @staticmethod
    def to_model(worker: Worker) -> WorkerModel:
        return WorkerModel(
            id=worker.id.value,
            code=worker.code.value,
            cedula=worker.cedula.value,
            name=worker.name.value,
            hire_date=worker.hire_date.value,
            area=worker.area.value,
            position=worker.position.value,
        )

    @staticmethod
    def to_entity(model: WorkerModel) -> Worker:
        return Worker.restore(
            id=model.id,
            code=model.code,
            cedula=model.cedula,
            name=model.name,
            hire_date=model.hire_date,
            area=model.area,
            position=model.position,
        )

    # ==================== WorkerRepository ====================

    def save(self, worker: Worker) -> Worker:
        self.upsert(self.to_model(worker))
        return worker

    def find_by_id(self, worker_id: str) -> Optional[Worker]:
        model = self.find_model_by_id(worker_id)
        return self.to_entity(model) if model else None

    def find_by_code(self, code: str) -> Optional[Worker]:
        model = self.find_one_model({"code": code})
        return self.to_entity(model) if model else None

    def find_by_cedula(self, cedula: str) -> Optional[Worker]:
        model = self.find_one_model({"cedula": cedula})
        return self.to_entity(model) if model else None

    def find_all(self) -> List[Worker]:
        return [self.to_entity(model) for model in self.find_models(order_by=["name"])]
