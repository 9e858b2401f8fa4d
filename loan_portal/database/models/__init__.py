from .member_model import Member
from .service_model import Service
from .request_model import LoanRequest
