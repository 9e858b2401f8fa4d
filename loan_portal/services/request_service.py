from fastapi import HTTPException, status
from loan_portal.database.models import LoanRequest
from loan_portal.database.repository import DocumentRepository
from loan_portal.schemas import LoanRequestCreate, LoanRequestUpdate
from typing import Dict
import logging

logger = logging.getLogger(__name__)


class LoanRequestService:
    """Loan requests are addressed by the applicant's mobile number.

    When several requests share a mobile, update and delete act on whichever
    one the store matches first.
    """

    def __init__(self, repository):
        self.repository = repository

    async def submit_request(self, request_data: LoanRequestCreate) -> Dict:
        created_request = await self.repository.insert(request_data.model_dump(exclude_unset=True))
        logger.info("Loan request submitted with ID: %s", created_request.get("_id"))
        return created_request

    # Overwrites every field present in the update body and returns the new document
    async def update_request(self, update_data: LoanRequestUpdate) -> Dict:
        updated_request = await self.repository.find_one_and_update(
            {"mobile": update_data.mobile},
            update_data.model_dump(exclude_unset=True)
        )
        if not updated_request:
            logger.warning("Update failed, no request for mobile: %s", update_data.mobile)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Request not found"
            )

        logger.info("Loan request updated with ID: %s", updated_request.get("_id"))
        return updated_request

    async def delete_request(self, mobile: int) -> Dict:
        deleted_request = await self.repository.find_one_and_delete({"mobile": mobile})
        if not deleted_request:
            logger.warning("Delete failed, no request for mobile: %s", mobile)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Request not found"
            )

        logger.info("Loan request deleted with ID: %s", deleted_request.get("_id"))
        return {"message": "Request deleted successfully", "deletedRequest": deleted_request}


loan_request_service = LoanRequestService(DocumentRepository(LoanRequest))
