from supabase import Client
from skillswap.modules.swap_requests.schemas import (
    SwapRequestCreate, SwapRequestResponse, SwapRequestDetail, SwapRequestBoard
)
from skillswap.modules.swap_requests.transitions import (
    PENDING, ACCEPTED, COMPLETED, TRANSITIONS, allowed_actions, ensure_transition
)
from skillswap.modules.skills.schemas import SkillSummary
from skillswap.modules.skills.service import SkillService
from skillswap.modules.profiles.service import ProfileService
from skillswap.core.dependencies import check_swap_participant, other_participant
from typing import Any, Dict, List, Set
from fastapi import HTTPException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


def _newest_first(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(rows, key=lambda r: r.get("created_at") or "", reverse=True)


class SwapRequestService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.skills = SkillService(supabase)
        self.profiles = ProfileService(supabase)

    def get_request(self, request_id: str) -> Dict[str, Any]:
        """Raw swap request row; 404 when missing"""
        result = self.supabase.table("swap_requests")\
            .select("*")\
            .eq("id", request_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Swap request not found")
        return result.data

    def create_request(self, requester_id: str, request_data: SwapRequestCreate) -> SwapRequestResponse:
        """Send a swap request: my offering skill for one of their offering skills"""
        try:
            if request_data.requested_user_id == requester_id:
                raise HTTPException(status_code=400, detail="You cannot send a swap request to yourself")

            skills = self.skills.get_skills_by_ids([request_data.offered_skill_id, request_data.wanted_skill_id])

            offered = skills.get(request_data.offered_skill_id)
            if not offered or offered["user_id"] != requester_id or offered["skill_type"] != "offering":
                raise HTTPException(status_code=400, detail="The offered skill must be one of your offering skills")

            wanted = skills.get(request_data.wanted_skill_id)
            if not wanted or wanted["user_id"] != request_data.requested_user_id or wanted["skill_type"] != "offering":
                raise HTTPException(status_code=400, detail="The wanted skill must be one the other user offers")

            result = self.supabase.table("swap_requests").insert({
                "requester_id": requester_id,
                "requested_user_id": request_data.requested_user_id,
                "offered_skill_id": request_data.offered_skill_id,
                "wanted_skill_id": request_data.wanted_skill_id,
                "message": request_data.message,
                "status": PENDING,
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to send swap request. Please try again.")

            created = result.data[0]
            logger.info(f"Swap request {created['id']} sent from {requester_id} to {request_data.requested_user_id}")
            return SwapRequestResponse(**created)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error sending swap request: {e}")
            raise HTTPException(status_code=500, detail="Failed to send swap request. Please try again.")

    def _reviewed_swap_ids(self, user_id: str, swap_ids: List[str]) -> Set[str]:
        if not swap_ids:
            return set()
        result = self.supabase.table("feedback")\
            .select("swap_request_id")\
            .eq("reviewer_id", user_id)\
            .in_("swap_request_id", swap_ids)\
            .execute()
        return {row["swap_request_id"] for row in result.data or []}

    def _to_details(self, rows: List[Dict[str, Any]], user_id: str) -> List[SwapRequestDetail]:
        """Attach counterpart profile, skill summaries and feedback state"""
        if not rows:
            return []
        skills = self.skills.get_skills_by_ids(
            [r["offered_skill_id"] for r in rows] + [r["wanted_skill_id"] for r in rows]
        )
        counterparts = {r["id"]: other_participant(r, user_id) for r in rows}
        profiles = self.profiles.get_profile_summaries(list(counterparts.values()))
        reviewed = self._reviewed_swap_ids(user_id, [r["id"] for r in rows if r["status"] == COMPLETED])

        def summary(skill_id):
            skill = skills.get(skill_id)
            if not skill:
                return None
            return SkillSummary(skill_name=skill["skill_name"], experience_level=skill["experience_level"])

        return [
            SwapRequestDetail(
                **row,
                counterpart_id=counterparts[row["id"]],
                counterpart_profile=profiles.get(counterparts[row["id"]]),
                offered_skill=summary(row["offered_skill_id"]),
                wanted_skill=summary(row["wanted_skill_id"]),
                actions=allowed_actions(row, user_id),
                feedback_given=row["id"] in reviewed,
            )
            for row in rows
        ]

    def list_requests(self, user_id: str) -> SwapRequestBoard:
        """Incoming/outgoing pending requests plus active and completed swaps"""
        try:
            incoming = self.supabase.table("swap_requests")\
                .select("*")\
                .eq("requested_user_id", user_id)\
                .order("created_at", desc=True)\
                .execute().data or []
            outgoing = self.supabase.table("swap_requests")\
                .select("*")\
                .eq("requester_id", user_id)\
                .order("created_at", desc=True)\
                .execute().data or []

            details = {d.id: d for d in self._to_details(incoming + outgoing, user_id)}

            def pick(rows, status):
                return [details[r["id"]] for r in _newest_first(rows) if r["status"] == status]

            return SwapRequestBoard(
                incoming=pick(incoming, PENDING),
                outgoing=pick(outgoing, PENDING),
                active=pick(incoming + outgoing, ACCEPTED),
                completed=pick(incoming + outgoing, COMPLETED),
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching requests: {e}")
            raise HTTPException(status_code=500, detail="Failed to load requests. Please try again.")

    def transition(self, request_id: str, user_id: str, action: str) -> SwapRequestResponse:
        """Apply accept / reject / complete. The write only lands if the status is still the one read."""
        try:
            swap_request = check_swap_participant(self.get_request(request_id), user_id)
            new_status = ensure_transition(action, swap_request, user_id)

            result = self.supabase.table("swap_requests")\
                .update({
                    "status": new_status,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                })\
                .eq("id", request_id)\
                .eq("status", swap_request["status"])\
                .execute()

            if not result.data:
                raise HTTPException(
                    status_code=409,
                    detail="This swap request was changed in the meantime. Please refresh."
                )

            logger.info(f"Swap request {request_id}: {swap_request['status']} -> {new_status} by {user_id}")
            return SwapRequestResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error applying {action} to swap request {request_id}: {e}")
            raise HTTPException(status_code=500, detail=TRANSITIONS[action]["error"])
