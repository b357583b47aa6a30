"""
Core dependencies for route protection and swap participation checks
"""

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.auth.service import AuthService
from supabase import Client
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Extract current user info from JWT token"""
    token = credentials.credentials
    user_data = auth_service.get_current_user(token)
    return user_data


def check_swap_participant(swap_request: Dict[str, Any], user_id: str) -> Dict[str, Any]:
    """Allow only the requester or the requested user. Others get 404 so ids are not disclosed."""
    if user_id in (swap_request.get("requester_id"), swap_request.get("requested_user_id")):
        return swap_request
    logger.info("User %s is not a participant of swap request %s", user_id, swap_request.get("id"))
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Swap request not found"
    )


def other_participant(swap_request: Dict[str, Any], user_id: str) -> str:
    """Return the participant of the swap who is not user_id"""
    if swap_request["requester_id"] == user_id:
        return swap_request["requested_user_id"]
    return swap_request["requester_id"]
