from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


class FeedbackCreate(BaseModel):
    swap_request_id: str
    rating: int = Field(default=5, ge=1, le=5)
    comment: Optional[str] = None
    would_swap_again: bool = True

    @field_validator("comment")
    @classmethod
    def strip_comment(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None


class FeedbackResponse(BaseModel):
    id: str
    swap_request_id: str
    reviewer_id: str
    reviewee_id: str
    rating: int
    comment: Optional[str] = None
    would_swap_again: bool = True
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RatingSummary(BaseModel):
    user_id: str
    count: int
    average_rating: Optional[float] = None
    would_swap_again_rate: Optional[int] = None  # percent
