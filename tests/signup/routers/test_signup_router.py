import httpx
import pytest
import respx

from create_user_signup.signup.exceptions.signup_local_validation_exception import (
    USERNAME_REQUIRED_MESSAGE,
)
from create_user_signup.signup.models.submission_outcome import (
    GENERIC_ERROR_MESSAGE,
    PASSWORD_NOT_ALLOWED_MESSAGE,
)
from create_user_signup.signup.policy.password_policy import PasswordPolicy
from tests.common import TEST_SIGNUP_API_URL


@pytest.mark.asyncio
async def test_health(async_client: httpx.AsyncClient) -> None:
    response = await async_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_password_policy_endpoint(async_client: httpx.AsyncClient) -> None:
    response = await async_client.post(
        "/signup/password-policy", json={"password": "abc def"}
    )

    assert response.status_code == 200
    assert response.json() == {"violations": PasswordPolicy().evaluate("abc def")}


@pytest.mark.asyncio
async def test_submit_with_path_token_creates_user(
    async_client: httpx.AsyncClient,
) -> None:
    with respx.mock(assert_all_called=True) as router:
        route = router.post(TEST_SIGNUP_API_URL).respond(status_code=200)

        response = await async_client.post(
            "/signup/abc123",
            json={"username": "alice", "password": "Abcdefghi1"},
        )

    assert response.status_code == 200
    assert response.json() == {
        "outcome": "success",
        "message": None,
        "user_was_created": True,
        "username_error": None,
        "password_violations": [],
    }
    assert route.calls.last.request.headers["authorization"] == "Bearer abc123"


@pytest.mark.asyncio
async def test_query_token_takes_precedence(async_client: httpx.AsyncClient) -> None:
    with respx.mock(assert_all_called=True) as router:
        route = router.post(TEST_SIGNUP_API_URL).respond(
            status_code=422, json={"errors": ["not_allowed"]}
        )

        response = await async_client.post(
            "/signup/abc123",
            params={"token": "tok1"},
            json={"username": "alice", "password": "Abcdefghi1"},
        )

    assert response.status_code == 200
    body = response.json()
    assert body["outcome"] == "policy_rejected"
    assert body["message"] == PASSWORD_NOT_ALLOWED_MESSAGE
    assert body["user_was_created"] is False
    assert route.calls.last.request.headers["authorization"] == "Bearer tok1"


@pytest.mark.asyncio
async def test_submit_maps_transport_failure(async_client: httpx.AsyncClient) -> None:
    with respx.mock(assert_all_called=True) as router:
        router.post(TEST_SIGNUP_API_URL).mock(
            side_effect=httpx.ConnectError("refused")
        )

        response = await async_client.post(
            "/signup",
            params={"token": "tok1"},
            json={"username": "alice", "password": "Abcdefghi1"},
        )

    assert response.status_code == 200
    assert response.json()["outcome"] == "unknown_failure"
    assert response.json()["message"] == GENERIC_ERROR_MESSAGE


@pytest.mark.asyncio
async def test_local_validation_failure_returns_422(
    async_client: httpx.AsyncClient,
) -> None:
    with respx.mock(assert_all_mocked=True) as router:
        route = router.post(TEST_SIGNUP_API_URL).respond(status_code=200)

        response = await async_client.post(
            "/signup/abc123",
            json={"username": " ", "password": "short"},
        )

    assert route.call_count == 0
    assert response.status_code == 422
    body = response.json()
    assert body["outcome"] is None
    assert body["username_error"] == USERNAME_REQUIRED_MESSAGE
    assert body["password_violations"] == PasswordPolicy().evaluate("short")


@pytest.mark.asyncio
async def test_submit_without_token_sends_empty_bearer(
    async_client: httpx.AsyncClient,
) -> None:
    with respx.mock(assert_all_called=True) as router:
        route = router.post(TEST_SIGNUP_API_URL).respond(status_code=401)

        response = await async_client.post(
            "/signup",
            json={"username": "alice", "password": "Abcdefghi1"},
        )

    assert response.status_code == 200
    assert response.json()["outcome"] == "auth_failure"
    assert route.calls.last.request.headers["authorization"] == "Bearer"
