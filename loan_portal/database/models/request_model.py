from beanie import Document
from pydantic import Field
from typing import Optional


class LoanRequest(Document):
    mobile: int = Field(..., description="Mobile number of the applying member")
    email: str = Field(..., description="Contact email of the applicant")
    amt: float = Field(..., description="Requested loan amount")
    type: str = Field(..., description="Service type the request is for")
    code: str = Field(..., description="Service code the request is for")
    msg: Optional[str] = Field(None, description="Free text message from the applicant")
    service: Optional[str] = Field(None, description="Service name set when the request is updated")
    remarks: Optional[str] = Field(None, description="Remarks set when the request is updated")

    class Settings:
        name = "requests"
