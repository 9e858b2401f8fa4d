from fastapi import HTTPException, status
from loan_portal.core import settings, hash_password
from loan_portal.database.models import Member
from loan_portal.database.repository import DocumentRepository
from loan_portal.schemas import MemberCreate, PasswordUpdate
from typing import Dict
import logging

logger = logging.getLogger(__name__)


class MemberService:
    def __init__(self, repository, hash_passwords: bool = True):
        self.repository = repository
        self.hash_passwords = hash_passwords

    def _stored_password(self, password: str) -> str:
        if not self.hash_passwords:
            return password
        return hash_password(password)

    # Registers a member unless one with the same mobile already exists.
    # The lookup and the insert are separate store calls, so two concurrent
    # registrations for one mobile can both succeed.
    async def register_member(self, member_data: MemberCreate) -> Dict:
        existing_member = await self.repository.find_one({"mobile": member_data.mobile})
        if existing_member:
            logger.warning("Registration rejected, member already exists for mobile: %s", member_data.mobile)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Member already exists"
            )

        data = member_data.model_dump(exclude_unset=True)
        data["createpassword"] = self._stored_password(member_data.createpassword)

        member = await self.repository.insert(data)
        logger.info("Member registered with ID: %s", member.get("_id"))
        return {"message": "Member registered successfully", "member": member}

    # Overwrites only the password of the member with the given mobile
    async def update_password(self, password_data: PasswordUpdate) -> Dict:
        updated_member = await self.repository.find_one_and_update(
            {"mobile": password_data.mobile},
            {"createpassword": self._stored_password(password_data.password)}
        )
        if not updated_member:
            logger.warning("Password update failed, no member for mobile: %s", password_data.mobile)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Member not found"
            )

        logger.info("Password updated for member ID: %s", updated_member.get("_id"))
        return {"message": "Password updated successfully", "updatedMember": updated_member}

    # Removes the member with the given mobile
    async def cancel_member(self, mobile: int) -> Dict:
        deleted_member = await self.repository.find_one_and_delete({"mobile": mobile})
        if not deleted_member:
            logger.warning("Cancellation failed, no member for mobile: %s", mobile)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Member not found"
            )

        logger.info("Membership cancelled for member ID: %s", deleted_member.get("_id"))
        return {"message": "Membership cancelled successfully", "deletedMember": deleted_member}


member_service = MemberService(DocumentRepository(Member), hash_passwords=settings.HASH_MEMBER_PASSWORDS)
