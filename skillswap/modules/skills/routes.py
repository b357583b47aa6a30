from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.skills.schemas import SkillCreate, SkillResponse, SkillType
from skillswap.modules.skills.service import SkillService
from skillswap.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/skills", tags=["skills"])


def get_skill_service(supabase: Client = Depends(get_supabase)) -> SkillService:
    return SkillService(supabase)


@router.get("/me", response_model=List[SkillResponse])
async def list_my_skills(
    skill_type: Optional[SkillType] = None,
    user_data: Dict = Depends(get_current_user_id),
    service: SkillService = Depends(get_skill_service)
):
    """List the current user's skills, optionally only offering or wanted"""
    return service.list_skills(user_data["id"], skill_type=skill_type)


@router.post("", response_model=SkillResponse, status_code=201)
async def add_skill(
    skill_data: SkillCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: SkillService = Depends(get_skill_service)
):
    """Add a skill to the current user's profile"""
    return service.add_skill(user_data["id"], skill_data)


@router.delete("/{skill_id}", status_code=204)
async def delete_skill(
    skill_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: SkillService = Depends(get_skill_service)
):
    """Remove one of the current user's skills"""
    service.delete_skill(user_data["id"], skill_id)
    return None
