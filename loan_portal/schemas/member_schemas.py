from pydantic import BaseModel, ConfigDict, Field

from .fields import EmailAddress, Integer


class MemberCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mobile: Integer = Field(..., description="Mobile number of the member")
    email: EmailAddress = Field(..., description="Email address of the member")
    occupation: str = Field(..., min_length=1, description="Occupation of the member")
    createpassword: str = Field(..., min_length=1, description="Password for the member account")


class PasswordUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mobile: Integer = Field(..., description="Mobile number of the member")
    password: str = Field(..., min_length=1, description="New password for the member account")


class MobileLookup(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mobile: Integer = Field(..., description="Mobile number identifying the record")
