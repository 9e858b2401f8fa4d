from beanie import Document
from pydantic import Field


class Member(Document):
    mobile: int = Field(..., description="Mobile number of the member, used as the lookup key")
    email: str = Field(..., description="Email address of the member")
    occupation: str = Field(..., description="Occupation of the member")
    createpassword: str = Field(..., description="Member password (bcrypt hash unless hashing is disabled)")

    class Settings:
        name = "members"
