import json
from unittest.mock import MagicMock

import pytest
import requests

from auth_tester.client import AuthApiClient
from auth_tester.session import SessionState

BASE_URL = "http://api.test/api"


def make_response(status_code: int, body=None, text: str = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    elif text is not None:
        response._content = text.encode("utf-8")
        response.headers["Content-Type"] = "text/html"
    else:
        response._content = b""
    return response


class ScriptedPrompt:
    """Stands in for input(): returns canned answers and records the prompts shown"""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, text=""):
        self.prompts.append(text)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def http():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(http):
    return AuthApiClient(base_url=BASE_URL, session=http)


@pytest.fixture
def state():
    return SessionState()
