import pytest
from fastapi.testclient import TestClient

from loan_portal.main import app
from loan_portal.api.dependencies import get_catalog_service, get_member_service, get_loan_request_service
from loan_portal.services.catalog_service import CatalogService
from loan_portal.services.member_service import MemberService
from loan_portal.services.request_service import LoanRequestService

from fakes import InMemoryRepository, FailingRepository


SAMPLE_SERVICES = [
    {
        "type": "home-loan",
        "code": "HL",
        "description": "Home loans",
        "imgUrl": "/images/home.png",
        "detail": ["Up to 240 months", "No prepayment charges"],
    },
    {
        "type": "gold-loan",
        "code": "GL",
        "description": "Loans against gold",
        "detail": ["Same-day disbursal"],
    },
]


@pytest.fixture
def stores():
    return {
        "services": InMemoryRepository(SAMPLE_SERVICES),
        "members": InMemoryRepository(),
        "requests": InMemoryRepository(),
    }


def _override_services(catalog_repo, member_repo, request_repo):
    app.dependency_overrides[get_catalog_service] = lambda: CatalogService(catalog_repo)
    app.dependency_overrides[get_member_service] = lambda: MemberService(member_repo, hash_passwords=False)
    app.dependency_overrides[get_loan_request_service] = lambda: LoanRequestService(request_repo)


@pytest.fixture
def client(stores):
    _override_services(stores["services"], stores["members"], stores["requests"])
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def failing_client():
    failing = FailingRepository()
    _override_services(failing, failing, failing)
    yield TestClient(app)
    app.dependency_overrides = {}
