from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.feedback.schemas import FeedbackCreate, FeedbackResponse, RatingSummary
from skillswap.modules.feedback.service import FeedbackService
from skillswap.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/feedback", tags=["feedback"])


def get_feedback_service(supabase: Client = Depends(get_supabase)) -> FeedbackService:
    return FeedbackService(supabase)


@router.post("", response_model=FeedbackResponse, status_code=201)
async def submit_feedback(
    feedback_data: FeedbackCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: FeedbackService = Depends(get_feedback_service)
):
    """Leave feedback for the other participant of a completed swap"""
    return service.submit_feedback(user_data["id"], feedback_data)


@router.get("/users/{user_id}", response_model=List[FeedbackResponse])
async def list_user_feedback(
    user_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: FeedbackService = Depends(get_feedback_service)
):
    return service.list_feedback_for_user(user_id)


@router.get("/users/{user_id}/summary", response_model=RatingSummary)
async def get_user_rating_summary(
    user_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: FeedbackService = Depends(get_feedback_service)
):
    """Average rating and would-swap-again share for a user"""
    return service.get_rating_summary(user_id)
