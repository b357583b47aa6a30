from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.availability.schemas import AvailabilityUpdate, AvailabilityResponse
from skillswap.modules.availability.service import AvailabilityService
from skillswap.core.dependencies import get_current_user_id
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/availability", tags=["availability"])


def get_availability_service(supabase: Client = Depends(get_supabase)) -> AvailabilityService:
    return AvailabilityService(supabase)


@router.get("/me", response_model=AvailabilityResponse)
async def get_my_availability(
    user_data: Dict = Depends(get_current_user_id),
    service: AvailabilityService = Depends(get_availability_service)
):
    """Get the current user's weekly availability"""
    return service.get_availability(user_data["id"])


@router.put("/me", response_model=AvailabilityResponse)
async def update_my_availability(
    availability_data: AvailabilityUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: AvailabilityService = Depends(get_availability_service)
):
    """Save the current user's days and time slots"""
    return service.upsert_availability(user_data["id"], availability_data)
