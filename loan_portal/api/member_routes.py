from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, Dict
import logging

from loan_portal.api.dependencies import get_member_service
from loan_portal.schemas import MemberCreate, PasswordUpdate, MobileLookup
from loan_portal.services.member_service import MemberService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Members"])

# Registers a new member keyed by mobile number
@router.post("/members/register", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def register_member(
    member_data: MemberCreate,
    service: MemberService = Depends(get_member_service)
):
    try:
        return await service.register_member(member_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error during member registration: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to register member"
        )

@router.put("/updatepassword", response_model=Dict[str, Any], status_code=status.HTTP_200_OK)
async def update_member_password(
    password_data: PasswordUpdate,
    service: MemberService = Depends(get_member_service)
):
    try:
        return await service.update_password(password_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error during password update: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to update password"
        )

@router.delete("/cancelmember", response_model=Dict[str, Any], status_code=status.HTTP_200_OK)
async def cancel_membership(
    lookup: MobileLookup,
    service: MemberService = Depends(get_member_service)
):
    try:
        return await service.cancel_member(lookup.mobile)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error during membership cancellation: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to cancel membership"
        )
