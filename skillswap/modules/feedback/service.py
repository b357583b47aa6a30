from supabase import Client
from skillswap.modules.feedback.schemas import FeedbackCreate, FeedbackResponse, RatingSummary
from skillswap.modules.swap_requests.service import SwapRequestService
from skillswap.modules.swap_requests.transitions import COMPLETED
from skillswap.core.dependencies import check_swap_participant, other_participant
from typing import List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class FeedbackService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.swap_requests = SwapRequestService(supabase)

    def submit_feedback(self, reviewer_id: str, feedback_data: FeedbackCreate) -> FeedbackResponse:
        """Rate the other participant of a completed swap, once per swap"""
        try:
            swap_request = check_swap_participant(
                self.swap_requests.get_request(feedback_data.swap_request_id), reviewer_id
            )
            if swap_request["status"] != COMPLETED:
                raise HTTPException(status_code=409, detail="Feedback can only be left for completed swaps")

            existing = self.supabase.table("feedback")\
                .select("id")\
                .eq("swap_request_id", feedback_data.swap_request_id)\
                .eq("reviewer_id", reviewer_id)\
                .execute()
            if existing.data:
                raise HTTPException(status_code=409, detail="You already left feedback for this swap")

            result = self.supabase.table("feedback").insert({
                "swap_request_id": feedback_data.swap_request_id,
                "reviewer_id": reviewer_id,
                "reviewee_id": other_participant(swap_request, reviewer_id),
                "rating": feedback_data.rating,
                "comment": feedback_data.comment,
                "would_swap_again": feedback_data.would_swap_again,
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to submit feedback. Please try again.")

            return FeedbackResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error submitting feedback: {e}")
            raise HTTPException(status_code=500, detail="Failed to submit feedback. Please try again.")

    def list_feedback_for_user(self, user_id: str) -> List[FeedbackResponse]:
        """Feedback the user received, newest first"""
        try:
            result = self.supabase.table("feedback")\
                .select("*")\
                .eq("reviewee_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            return [FeedbackResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching feedback for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load feedback. Please try again.")

    def get_rating_summary(self, user_id: str) -> RatingSummary:
        received = self.list_feedback_for_user(user_id)
        if not received:
            return RatingSummary(user_id=user_id, count=0)
        count = len(received)
        return RatingSummary(
            user_id=user_id,
            count=count,
            average_rating=round(sum(f.rating for f in received) / count, 1),
            would_swap_again_rate=round(100 * sum(1 for f in received if f.would_swap_again) / count),
        )
