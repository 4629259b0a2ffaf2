"""SQLAlchemy Base class and model registry."""
from app.models.base.base_model import Base


def import_models() -> None:
    """Import all models so they are registered on Base.metadata."""
    from app.models.worker import WorkerModel  # noqa: F401
    from app.models.vacation_request import VacationRequestModel  # noqa: F401


__all__ = ["Base", "import_models"]
