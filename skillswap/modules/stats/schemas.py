from pydantic import BaseModel
from typing import Optional


class CommunityStats(BaseModel):
    active_members: int
    skills_exchanged: int
    satisfaction_rate: Optional[int] = None  # percent of ratings >= 4
    skill_categories: int
