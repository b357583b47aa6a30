"""
Swap request lifecycle

    pending --accept--> accepted --complete--> completed
    pending --reject--> rejected

Only the requested user answers a pending request. Either participant can
mark an accepted swap as completed. rejected and completed are terminal.
"""

from fastapi import HTTPException, status
from typing import Any, Dict, List

PENDING = "pending"
ACCEPTED = "accepted"
REJECTED = "rejected"
COMPLETED = "completed"

STATUSES = (PENDING, ACCEPTED, REJECTED, COMPLETED)

REQUESTED_USER = "requested_user"
PARTICIPANT = "participant"

TRANSITIONS = {
    "accept": {
        "from": PENDING,
        "to": ACCEPTED,
        "actor": REQUESTED_USER,
        "error": "Failed to accept request. Please try again.",
    },
    "reject": {
        "from": PENDING,
        "to": REJECTED,
        "actor": REQUESTED_USER,
        "error": "Failed to reject request. Please try again.",
    },
    "complete": {
        "from": ACCEPTED,
        "to": COMPLETED,
        "actor": PARTICIPANT,
        "error": "Failed to complete swap. Please try again.",
    },
}


def _is_actor(rule: Dict[str, Any], swap_request: Dict[str, Any], user_id: str) -> bool:
    if rule["actor"] == REQUESTED_USER:
        return swap_request.get("requested_user_id") == user_id
    return user_id in (swap_request.get("requester_id"), swap_request.get("requested_user_id"))


def allowed_actions(swap_request: Dict[str, Any], user_id: str) -> List[str]:
    """Actions user_id may take on the request in its current status"""
    return [
        action for action, rule in TRANSITIONS.items()
        if swap_request.get("status") == rule["from"] and _is_actor(rule, swap_request, user_id)
    ]


def ensure_transition(action: str, swap_request: Dict[str, Any], user_id: str) -> str:
    """Return the status `action` leads to, or raise if user_id may not take it now"""
    rule = TRANSITIONS.get(action)
    if rule is None:
        raise ValueError(f"Unknown swap request action: {action}")

    if not _is_actor(rule, swap_request, user_id):
        who = "the requested user" if rule["actor"] == REQUESTED_USER else "a participant"
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Only {who} can {action} this request"
        )

    current = swap_request.get("status")
    if current != rule["from"]:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Cannot {action} a swap request that is {current}"
        )
    return rule["to"]
