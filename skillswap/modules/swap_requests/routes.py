from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.swap_requests.schemas import (
    SwapRequestCreate, SwapRequestResponse, SwapRequestBoard
)
from skillswap.modules.swap_requests.service import SwapRequestService
from skillswap.core.dependencies import get_current_user_id
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/swap-requests", tags=["swap-requests"])


def get_swap_request_service(supabase: Client = Depends(get_supabase)) -> SwapRequestService:
    return SwapRequestService(supabase)


@router.post("", response_model=SwapRequestResponse, status_code=201)
async def create_swap_request(
    request_data: SwapRequestCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: SwapRequestService = Depends(get_swap_request_service)
):
    """Send a swap request to another user"""
    return service.create_request(user_data["id"], request_data)


@router.get("", response_model=SwapRequestBoard)
async def list_swap_requests(
    user_data: Dict = Depends(get_current_user_id),
    service: SwapRequestService = Depends(get_swap_request_service)
):
    """Incoming, outgoing, active and completed swaps of the current user"""
    return service.list_requests(user_data["id"])


@router.post("/{request_id}/accept", response_model=SwapRequestResponse)
async def accept_swap_request(
    request_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: SwapRequestService = Depends(get_swap_request_service)
):
    """Accept a pending request (requested user only)"""
    return service.transition(request_id, user_data["id"], "accept")


@router.post("/{request_id}/reject", response_model=SwapRequestResponse)
async def reject_swap_request(
    request_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: SwapRequestService = Depends(get_swap_request_service)
):
    """Reject a pending request (requested user only)"""
    return service.transition(request_id, user_data["id"], "reject")


@router.post("/{request_id}/complete", response_model=SwapRequestResponse)
async def complete_swap(
    request_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: SwapRequestService = Depends(get_swap_request_service)
):
    """Mark an accepted swap as completed (either participant)"""
    return service.transition(request_id, user_data["id"], "complete")
