from .member_schemas import MemberCreate, PasswordUpdate, MobileLookup
from .request_schemas import LoanRequestCreate, LoanRequestUpdate
from .emi_schemas import EMICalculationRequest, EMICalculationResponse
