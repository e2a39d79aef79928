import pytest
import requests
from unittest.mock import MagicMock

from auth_tester.client import AuthApiClient, decode_body
from auth_tester.exceptions import ApiError, TransportError

from conftest import BASE_URL, make_response


def test_register_posts_json_body(client, http):
    http.request.return_value = make_response(201, {"id": "u1"})

    payload = client.register("Test User", "test@example.com", "testpassword123")

    assert payload == {"id": "u1"}
    http.request.assert_called_once_with(
        "POST",
        f"{BASE_URL}/users",
        timeout=None,
        json={"name": "Test User", "email": "test@example.com", "password": "testpassword123"},
    )


def test_verify_email_endpoint(client, http):
    http.request.return_value = make_response(200, {"token": "jwt", "apiKey": "key"})

    client.verify_email("test@example.com", "123456")

    args, kwargs = http.request.call_args
    assert args == ("POST", f"{BASE_URL}/users/verify-email")
    assert kwargs["json"] == {"email": "test@example.com", "code": "123456"}


def test_login_endpoints(client, http):
    http.request.return_value = make_response(200, {"token": "t"})

    client.login_user("user@example.com", "pw")
    assert http.request.call_args[0] == ("POST", f"{BASE_URL}/users/login")
    assert http.request.call_args[1]["json"] == {"email": "user@example.com", "password": "pw"}

    client.login_admin("admin@example.com", "adminpw")
    assert http.request.call_args[0] == ("POST", f"{BASE_URL}/admin/login")
    assert http.request.call_args[1]["json"] == {"email": "admin@example.com", "password": "adminpw"}


def test_get_profile_sends_bearer_token(client, http):
    http.request.return_value = make_response(200, {"email": "test@example.com"})

    assert client.get_profile("abc.def") == {"email": "test@example.com"}
    http.request.assert_called_once_with(
        "GET",
        f"{BASE_URL}/users/profile",
        timeout=None,
        headers={"Authorization": "Bearer abc.def"},
    )


def test_get_api_user_sends_api_key_header(client, http):
    http.request.return_value = make_response(200, {"_id": "u1"})

    client.get_api_user("my-key")

    args, kwargs = http.request.call_args
    assert args == ("GET", f"{BASE_URL}/v1/user")
    assert kwargs["headers"] == {"x-api-key": "my-key"}


def test_non_2xx_raises_api_error_with_payload(client, http):
    http.request.return_value = make_response(401, {"error": "invalid credentials"})

    with pytest.raises(ApiError) as exc_info:
        client.login_user("user@example.com", "wrong")

    assert exc_info.value.status_code == 401
    assert exc_info.value.payload == {"error": "invalid credentials"}
    assert exc_info.value.details["operation"] == "user login"


def test_connection_error_raises_transport_error(client, http):
    http.request.side_effect = requests.ConnectionError("Connection refused")

    with pytest.raises(TransportError) as exc_info:
        client.login_user("user@example.com", "pw")

    assert exc_info.value.message == "Connection refused"
    assert exc_info.value.status_code is None
    assert exc_info.value.details["error_type"] == "ConnectionError"


def test_timeout_is_forwarded():
    http = MagicMock(spec=requests.Session)
    http.request.return_value = make_response(200, {})
    client = AuthApiClient(base_url=BASE_URL + "/", timeout=2.5, session=http)

    client.get_api_user("k")

    assert client.base_url == BASE_URL
    assert http.request.call_args[1]["timeout"] == 2.5


def test_decode_body_variants():
    assert decode_body(make_response(200, {"a": 1})) == {"a": 1}
    assert decode_body(make_response(502, text="<html>Bad Gateway</html>")) == "<html>Bad Gateway</html>"
    assert decode_body(make_response(204)) is None


def test_close_closes_session(client, http):
    client.close()
    http.close.assert_called_once()


def test_unencodable_header_raises_transport_error(client, http):
    http.request.side_effect = UnicodeEncodeError("latin-1", "ключ", 0, 4, "ordinal not in range(256)")

    with pytest.raises(TransportError) as exc_info:
        client.get_api_user("ключ")

    assert "'latin-1' codec can't encode" in exc_info.value.message
    assert exc_info.value.details["error_type"] == "UnicodeEncodeError"
