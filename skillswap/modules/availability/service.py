from supabase import Client
from skillswap.modules.availability.schemas import AvailabilityUpdate, AvailabilityResponse
from typing import Optional
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class AvailabilityService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def find_availability(self, user_id: str) -> Optional[AvailabilityResponse]:
        """Return the user's availability or None when it was never saved"""
        result = self.supabase.table("availability")\
            .select("*")\
            .eq("user_id", user_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            return None
        return AvailabilityResponse(**result.data)

    def get_availability(self, user_id: str) -> AvailabilityResponse:
        try:
            availability = self.find_availability(user_id)
            if availability is None:
                raise HTTPException(status_code=404, detail="Availability not set")
            return availability
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching availability for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load availability. Please try again.")

    def upsert_availability(self, user_id: str, availability_data: AvailabilityUpdate) -> AvailabilityResponse:
        """Insert or replace the user's availability (one row per user)"""
        try:
            result = self.supabase.table("availability")\
                .upsert({
                    "user_id": user_id,
                    "days": availability_data.days,
                    "time_slots": availability_data.time_slots,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                }, on_conflict="user_id")\
                .execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to save availability. Please try again.")

            return AvailabilityResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error upserting availability: {e}")
            raise HTTPException(status_code=500, detail="Failed to save availability. Please try again.")
