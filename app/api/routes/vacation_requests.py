"""
Vacation request endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.api import deps
from app.domain.value_objects import VacationStatus
from app.schemas.vacation_request import (
    ApproveVacationRequest,
    RejectVacationRequest,
    VacationRequestCreate,
    VacationRequestResponse,
)
from app.services.vacation_request_service import VacationRequestService

router = APIRouter(prefix="/vacation-requests", tags=["Vacation Requests"])


@router.post(
    "",
    response_model=VacationRequestResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a vacation request",
    responses={
        400: {"description": "Invalid request, insufficient balance or bad date range"},
        404: {"description": "Worker not found"},
    },
)
def create_vacation_request(
    payload: VacationRequestCreate,
    service: VacationRequestService = Depends(deps.get_vacation_request_service),
):
    return VacationRequestResponse.from_entity(service.create_vacation_request(payload))


@router.get(
    "",
    response_model=List[VacationRequestResponse],
    response_model_exclude_none=True,
    summary="List vacation requests, newest first",
)
def list_vacation_requests(
    status_filter: Optional[VacationStatus] = Query(default=None, alias="status"),
    service: VacationRequestService = Depends(deps.get_vacation_request_service),
):
    return [
        VacationRequestResponse.from_entity(vacation_request)
        for vacation_request in service.list_vacation_requests(status_filter)
    ]


@router.get(
    "/{vacation_request_id}",
    response_model=VacationRequestResponse,
    response_model_exclude_none=True,
    summary="Get a vacation request",
    responses={404: {"description": "Vacation request not found"}},
)
def get_vacation_request(
    vacation_request_id: str,
    service: VacationRequestService = Depends(deps.get_vacation_request_service),
):
    return VacationRequestResponse.from_entity(service.get_vacation_request(vacation_request_id))


@router.put(
    "/{vacation_request_id}/approve",
    response_model=VacationRequestResponse,
    response_model_exclude_none=True,
    summary="Approve a pending vacation request",
    responses={
        400: {"description": "Request is not pending"},
        404: {"description": "Vacation request not found"},
        409: {"description": "Request changed concurrently"},
    },
)
def approve_vacation_request(
    vacation_request_id: str,
    payload: ApproveVacationRequest,
    service: VacationRequestService = Depends(deps.get_vacation_request_service),
):
    vacation_request = service.approve_vacation_request(vacation_request_id, payload.approved_by)
    return VacationRequestResponse.from_entity(vacation_request)


@router.put(
    "/{vacation_request_id}/reject",
    response_model=VacationRequestResponse,
    response_model_exclude_none=True,
    summary="Reject a pending vacation request",
    responses={
        400: {"description": "Request is not pending"},
        404: {"description": "Vacation request not found"},
        409: {"description": "Request changed concurrently"},
    },
)
def reject_vacation_request(
    vacation_request_id: str,
    payload: RejectVacationRequest,
    service: VacationRequestService = Depends(deps.get_vacation_request_service),
):
    vacation_request = service.reject_vacation_request(vacation_request_id, payload.rejected_by)
    return VacationRequestResponse.from_entity(vacation_request)


@router.delete(
    "/{vacation_request_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a vacation request",
    responses={404: {"description": "Vacation request not found"}},
)
def delete_vacation_request(
    vacation_request_id: str,
    service: VacationRequestService = Depends(deps.get_vacation_request_service),
):
    service.delete_vacation_request(vacation_request_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
