"""Domain services."""

from app.domain.services.vacation_calculation_service import (
    VacationBalance,
    VacationCalculationService,
)

__all__ = ["VacationBalance", "VacationCalculationService"]
