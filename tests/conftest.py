import pytest
from postgrest.exceptions import APIError
from core.interfaces.repositories import (
    IAuthRepository,
    INotificationRepository,
    IProfileRepository,
    IBoutRepository,
    IPaymentRepository,
)
from core.utils.platform_fees import PlatformFeeCalculator
from infrastructure.database.supabase_client import reset_clients


@pytest.fixture(autouse=True)
def _fresh_clients():
    reset_clients()
    yield
    reset_clients()


@pytest.fixture
def api_error():
    return APIError({"message": "connection refused", "code": "500", "hint": None, "details": None})


@pytest.fixture
def mock_auth_repo(mocker):
    repo = mocker.Mock(spec=IAuthRepository)
    repo.get_user_id.return_value = "user-1"
    return repo


@pytest.fixture
def mock_notification_repo(mocker):
    return mocker.Mock(spec=INotificationRepository)


@pytest.fixture
def mock_profile_repo(mocker):
    return mocker.Mock(spec=IProfileRepository)


@pytest.fixture
def mock_bout_repo(mocker):
    return mocker.Mock(spec=IBoutRepository)


@pytest.fixture
def mock_payment_repo(mocker):
    return mocker.Mock(spec=IPaymentRepository)


@pytest.fixture
def fee_calculator():
    return PlatformFeeCalculator(5)


@pytest.fixture
def mock_supabase(mocker):
    """Supabase client whose query builders chain back to themselves"""
    client = mocker.MagicMock()
    query = client.table.return_value
    for method in ("select", "update", "eq", "in_", "or_", "contains", "order", "limit"):
        getattr(query, method).return_value = query
    query.execute.return_value = mocker.Mock(data=[])
    return client
