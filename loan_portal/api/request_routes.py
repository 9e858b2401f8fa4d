from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, Dict
import logging

from loan_portal.api.dependencies import get_loan_request_service
from loan_portal.schemas import LoanRequestCreate, LoanRequestUpdate, MobileLookup
from loan_portal.services.request_service import LoanRequestService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Loan Requests"])

# Submits a loan request; the path type is informational, the body carries the product
@router.post("/service/{service_type}/form", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def submit_loan_request(
    service_type: str,
    request_data: LoanRequestCreate,
    service: LoanRequestService = Depends(get_loan_request_service)
):
    try:
        return await service.submit_request(request_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error submitting loan request for {service_type}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to submit request"
        )

@router.put("/updaterequest", response_model=Dict[str, Any], status_code=status.HTTP_200_OK)
async def update_loan_request(
    update_data: LoanRequestUpdate,
    service: LoanRequestService = Depends(get_loan_request_service)
):
    try:
        return await service.update_request(update_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating loan request: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to update request"
        )

@router.delete("/deleterequest", response_model=Dict[str, Any], status_code=status.HTTP_200_OK)
async def delete_loan_request(
    lookup: MobileLookup,
    service: LoanRequestService = Depends(get_loan_request_service)
):
    try:
        return await service.delete_request(lookup.mobile)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting loan request: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to delete request"
        )
