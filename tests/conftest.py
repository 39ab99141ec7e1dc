from typing import AsyncGenerator

import httpx
import pytest
from asgi_lifespan import LifespanManager
from oidcauthlib.container.simple_container import SimpleContainer

from create_user_signup.signup.api import create_app
from create_user_signup.signup.managers.signup_submission_manager import (
    SignupSubmissionManager,
)
from tests.common import create_test_container


@pytest.fixture
def test_container() -> SimpleContainer:
    return create_test_container()


@pytest.fixture
def submission_manager(test_container: SimpleContainer) -> SignupSubmissionManager:
    manager: SignupSubmissionManager = test_container.resolve(SignupSubmissionManager)
    return manager


@pytest.fixture
async def async_client(
    test_container: SimpleContainer,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    app = create_app(container=test_container)
    async with LifespanManager(app=app) as manager:
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=manager.app), base_url="http://test"
        ) as client:
            yield client
