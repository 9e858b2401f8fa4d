from pydantic import BaseModel, ConfigDict, Field

from .fields import Number


class EMICalculationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    amt: Number = Field(..., description="Principal amount")
    tenure: Number = Field(..., description="Repayment term in months")
    interestRate: Number = Field(..., description="Annual interest rate in percent")


class EMICalculationResponse(BaseModel):
    EMI: str = Field(..., description="Monthly installment rounded to two decimals")
