from fastapi import APIRouter, Depends
from skillswap.core.dependencies import get_current_user_id
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me")
async def get_current_user(current_user: Dict = Depends(get_current_user_id)):
    """Get current authenticated user"""
    return current_user
