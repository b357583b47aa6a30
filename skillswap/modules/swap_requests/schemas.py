from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime
from skillswap.modules.profiles.schemas import ProfileSummary
from skillswap.modules.skills.schemas import SkillSummary


class SwapRequestCreate(BaseModel):
    requested_user_id: str
    offered_skill_id: str
    wanted_skill_id: str
    message: Optional[str] = None

    @field_validator("message")
    @classmethod
    def strip_message(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None


class SwapRequestResponse(BaseModel):
    id: str
    requester_id: str
    requested_user_id: str
    offered_skill_id: str
    wanted_skill_id: str
    message: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SwapRequestDetail(SwapRequestResponse):
    counterpart_id: str
    counterpart_profile: Optional[ProfileSummary] = None
    offered_skill: Optional[SkillSummary] = None
    wanted_skill: Optional[SkillSummary] = None
    actions: List[str] = []  # accept / reject / complete, whichever the caller may take
    feedback_given: bool = False


class SwapRequestBoard(BaseModel):
    incoming: List[SwapRequestDetail] = []
    outgoing: List[SwapRequestDetail] = []
    active: List[SwapRequestDetail] = []
    completed: List[SwapRequestDetail] = []
