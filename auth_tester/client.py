from typing import Any, Optional

import requests

from auth_tester.config import settings
from auth_tester.exceptions import ApiError, handle_transport_error
from auth_tester.schemas.auth import LoginRequest, RegisterRequest, VerifyEmailRequest
from auth_tester.utils.logger import get_logger, log_api_call

logger = get_logger("client")


def decode_body(response: requests.Response) -> Any:
    """Return the JSON body, the raw text if it is not JSON, or None if empty"""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class AuthApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, operation: str, **kwargs) -> Any:
        """
        Send one request and return the decoded body

        Raises:
            TransportError: If no HTTP response was received
            ApiError: If the response status is not 2xx
        """
        url = f"{self.base_url}/{path}"
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.RequestException, ValueError) as e:
            # ValueError covers UnicodeEncodeError from non-latin-1 header values
            raise handle_transport_error(e, operation)

        logger.debug(f"{method} {url} -> {response.status_code}")
        payload = decode_body(response)
        if not response.ok:
            raise ApiError(response.status_code, payload, details={"operation": operation, "url": url})
        return payload

    @log_api_call("register user")
    def register(self, name: str, email: str, password: str) -> Any:
        body = RegisterRequest(name=name, email=email, password=password)
        return self._request("POST", "users", "register user", json=body.model_dump())

    @log_api_call("verify email")
    def verify_email(self, email: str, code: str) -> Any:
        body = VerifyEmailRequest(email=email, code=code)
        return self._request("POST", "users/verify-email", "verify email", json=body.model_dump())

    @log_api_call("user login")
    def login_user(self, email: str, password: str) -> Any:
        body = LoginRequest(email=email, password=password)
        return self._request("POST", "users/login", "user login", json=body.model_dump())

    @log_api_call("admin login")
    def login_admin(self, email: str, password: str) -> Any:
        body = LoginRequest(email=email, password=password)
        return self._request("POST", "admin/login", "admin login", json=body.model_dump())

    @log_api_call("get profile")
    def get_profile(self, token: str) -> Any:
        headers = {"Authorization": f"Bearer {token}"}
        return self._request("GET", "users/profile", "get profile", headers=headers)

    @log_api_call("api key user")
    def get_api_user(self, api_key: str) -> Any:
        headers = {"x-api-key": api_key}
        return self._request("GET", "v1/user", "api key user", headers=headers)

    def close(self):
        self.session.close()
