from pydantic import BaseModel, field_validator
from typing import Optional, Literal
from datetime import datetime

ExperienceLevel = Literal["Beginner", "Intermediate", "Expert"]
SkillType = Literal["offering", "wanted"]


class SkillCreate(BaseModel):
    skill_name: str
    description: Optional[str] = None
    experience_level: ExperienceLevel
    skill_type: SkillType
    is_priority: Optional[bool] = False

    @field_validator("skill_name")
    @classmethod
    def skill_name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter a skill name.")
        return value

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None


class SkillResponse(BaseModel):
    id: str
    user_id: str
    skill_name: str
    description: Optional[str] = None
    experience_level: str
    skill_type: str
    is_priority: Optional[bool] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SkillSummary(BaseModel):
    skill_name: str
    experience_level: str
