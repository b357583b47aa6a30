from pydantic import BaseModel, field_validator
from typing import Optional, List, Literal
from datetime import datetime

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
TIME_SLOTS = ["Morning", "Afternoon", "Evening"]

Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
TimeSlot = Literal["Morning", "Afternoon", "Evening"]


class AvailabilityUpdate(BaseModel):
    days: List[Weekday] = []
    time_slots: List[TimeSlot] = []

    @field_validator("days")
    @classmethod
    def canonical_days(cls, value: List[str]) -> List[str]:
        return sorted(set(value), key=WEEKDAYS.index)

    @field_validator("time_slots")
    @classmethod
    def canonical_time_slots(cls, value: List[str]) -> List[str]:
        return sorted(set(value), key=TIME_SLOTS.index)


class AvailabilityResponse(BaseModel):
    id: str
    user_id: str
    days: List[str]
    time_slots: List[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
