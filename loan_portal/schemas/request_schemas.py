from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from .fields import EmailAddress, Integer, Number


class LoanRequestCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mobile: Integer = Field(..., description="Mobile number of the applicant")
    email: EmailAddress = Field(..., description="Contact email of the applicant")
    amt: Number = Field(..., description="Requested loan amount")
    type: str = Field(..., min_length=1, description="Service type the request is for")
    msg: Optional[str] = Field(None, min_length=1, description="Optional message from the applicant")
    code: str = Field(..., min_length=1, description="Service code the request is for")


class LoanRequestUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mobile: Integer = Field(..., description="Mobile number the request was submitted with")
    service: str = Field(..., min_length=1, description="Service name")
    type: str = Field(..., min_length=1, description="Service type")
    remarks: Optional[str] = Field(None, min_length=1, description="Optional remarks")
