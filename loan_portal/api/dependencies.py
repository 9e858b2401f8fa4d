from loan_portal.services.catalog_service import CatalogService, catalog_service
from loan_portal.services.member_service import MemberService, member_service
from loan_portal.services.request_service import LoanRequestService, loan_request_service


def get_catalog_service() -> CatalogService:
    return catalog_service


def get_member_service() -> MemberService:
    return member_service


def get_loan_request_service() -> LoanRequestService:
    return loan_request_service
