"""
Worker endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api import deps
from app.schemas.vacation_request import (
    VacationBalanceResponse,
    VacationRequestResponse,
    WorkerVacationBalanceResponse,
)
from app.schemas.worker import WorkerCreate, WorkerResponse
from app.services.vacation_request_service import VacationRequestService
from app.services.worker_service import WorkerService

router = APIRouter(prefix="/workers", tags=["Workers"])


@router.post(
    "",
    response_model=WorkerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a worker",
    responses={400: {"description": "Invalid field"}, 409: {"description": "Duplicate code or cedula"}},
)
def create_worker(
    payload: WorkerCreate,
    service: WorkerService = Depends(deps.get_worker_service),
):
    worker = service.create_worker(payload)
    return WorkerResponse.from_entity(worker)


@router.get("", response_model=List[WorkerResponse], summary="List workers ordered by name")
def list_workers(service: WorkerService = Depends(deps.get_worker_service)):
    return [WorkerResponse.from_entity(worker) for worker in service.list_workers()]


@router.get(
    "/{worker_id}",
    response_model=WorkerResponse,
    summary="Get a worker",
    responses={404: {"description": "Worker not found"}},
)
def get_worker(worker_id: str, service: WorkerService = Depends(deps.get_worker_service)):
    return WorkerResponse.from_entity(service.get_worker(worker_id))


@router.delete(
    "/{worker_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a worker",
    responses={404: {"description": "Worker not found"}},
)
def delete_worker(worker_id: str, service: WorkerService = Depends(deps.get_worker_service)):
    service.delete_worker(worker_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{worker_id}/vacation-balance",
    response_model=WorkerVacationBalanceResponse,
    summary="Get a worker's vacation balance",
    responses={404: {"description": "Worker not found"}},
)
def get_worker_vacation_balance(
    worker_id: str,
    service: VacationRequestService = Depends(deps.get_vacation_request_service),
):
    result = service.get_worker_vacation_balance(worker_id)
    return WorkerVacationBalanceResponse(
        worker_id=result.worker.id.value,
        worker_name=result.worker.name.value,
        seniority_years=result.seniority_years,
        vacation_balance=VacationBalanceResponse.from_balance(result.balance),
    )


@router.get(
    "/{worker_id}/vacation-requests",
    response_model=List[VacationRequestResponse],
    response_model_exclude_none=True,
    summary="List a worker's vacation requests, newest first",
    responses={404: {"description": "Worker not found"}},
)
def list_worker_vacation_requests(
    worker_id: str,
    service: VacationRequestService = Depends(deps.get_vacation_request_service),
):
    return [
        VacationRequestResponse.from_entity(vacation_request)
        for vacation_request in service.list_worker_vacation_requests(worker_id)
    ]
