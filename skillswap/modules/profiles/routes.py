from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.profiles.schemas import (
    ProfileUpsert, ProfileResponse, ProfileWithSkillsResponse, MyProfileResponse
)
from skillswap.modules.profiles.service import ProfileService
from skillswap.core.dependencies import get_current_user_id
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(supabase: Client = Depends(get_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("/me", response_model=MyProfileResponse)
async def get_my_profile(
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Get the current user's profile, skills and availability"""
    return service.get_my_profile(user_data["id"])


@router.put("/me", response_model=ProfileResponse)
async def save_my_profile(
    profile_data: ProfileUpsert,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Create or update the current user's profile"""
    return service.upsert_profile(user_data["id"], profile_data)


@router.get("/{user_id}", response_model=ProfileWithSkillsResponse)
async def get_profile(
    user_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Get a public profile (or your own) with its skills"""
    return service.get_visible_profile(user_id, viewer_id=user_data["id"])
