from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, Dict, List
import logging

from loan_portal.api.dependencies import get_catalog_service
from loan_portal.schemas import EMICalculationRequest, EMICalculationResponse
from loan_portal.services.catalog_service import CatalogService
from loan_portal.services.emi_service import calculate_emi

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Services"])

# Lists every loan product offered
@router.get("/allservices", response_model=List[Dict[str, Any]], status_code=status.HTTP_200_OK)
async def list_services(service: CatalogService = Depends(get_catalog_service)):
    try:
        return await service.list_services()
    except Exception as e:
        logger.error(f"Error fetching services: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to fetch services"
        )

# Fetches one loan product by type. An unknown type still answers 200,
# with an error-shaped body instead of the record.
@router.get("/service/{service_type}", response_model=Dict[str, Any], status_code=status.HTTP_200_OK)
async def get_service_by_type(service_type: str, service: CatalogService = Depends(get_catalog_service)):
    try:
        found = await service.get_service_by_type(service_type)
    except Exception as e:
        logger.error(f"Error fetching service {service_type}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching service"
        )
    return found or {"error": "Service not found"}

# Computes the monthly installment for an amount, tenure and annual rate
@router.post("/service/{service_type}/calculate", response_model=EMICalculationResponse, status_code=status.HTTP_200_OK)
async def calculate_service_emi(service_type: str, emi_data: EMICalculationRequest) -> EMICalculationResponse:
    try:
        emi = calculate_emi(emi_data.amt, emi_data.tenure, emi_data.interestRate)
    except Exception as e:
        logger.error(f"EMI calculation failed for {service_type}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to calculate EMI"
        )
    return EMICalculationResponse(EMI=emi)
