from beanie import Document
from pydantic import Field
from typing import List, Optional


class Service(Document):
    type: str = Field(..., description="Loan product category, e.g. 'home-loan'")
    code: str = Field(..., description="Short product identifier referenced by loan requests")
    description: str = Field(..., description="Description of the loan product")
    imgUrl: Optional[str] = Field(None, description="Image shown for the product")
    detail: List[str] = Field(..., description="Feature list of the product")

    class Settings:
        name = "services"
