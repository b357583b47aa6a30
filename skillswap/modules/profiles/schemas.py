from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime
from skillswap.modules.skills.schemas import SkillResponse
from skillswap.modules.availability.schemas import AvailabilityResponse


class ProfileUpsert(BaseModel):
    full_name: str
    location: Optional[str] = None
    bio: Optional[str] = None
    is_public: bool = True
    profile_photo: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def full_name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Full name is required")
        return value


class ProfileResponse(BaseModel):
    id: str
    user_id: str
    full_name: str
    location: Optional[str] = None
    bio: Optional[str] = None
    is_public: bool = True
    profile_photo: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProfileWithSkillsResponse(ProfileResponse):
    skills: List[SkillResponse] = []


class MyProfileResponse(ProfileWithSkillsResponse):
    availability: Optional[AvailabilityResponse] = None


class ProfileSummary(BaseModel):
    full_name: str
    location: Optional[str] = None
    profile_photo: Optional[str] = None
