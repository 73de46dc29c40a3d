import json

import pytest
from unittest.mock import MagicMock

from ecwid_sdk.api_client import EcwidClient


STORE_ID = 666
TOKEN = "token"
BASE_URL = f"https://app.ecwid.com/api/v3/{STORE_ID}"


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        if text is not None:
            self.content = text.encode("utf-8")
        else:
            self.content = json.dumps(json_data).encode("utf-8")


@pytest.fixture
def client():
    """Client whose session never touches the network."""
    c = EcwidClient(store_id=STORE_ID, token=TOKEN)
    c.session.request = MagicMock(return_value=FakeResponse(200, {}))
    return c


def request_of(client, index=0):
    """(method, url, kwargs) of the n-th request sent by the mocked session."""
    call = client.session.request.call_args_list[index]
    method, url = call.args
    return method, url, call.kwargs


@pytest.fixture
def make_response():
    """Factory for fake responses: make_response(status, json_data=..., text=...)."""
    return FakeResponse


@pytest.fixture
def sent_request():
    """Accessor for the requests recorded by the mocked session."""
    return request_of


@pytest.fixture
def base_url():
    return BASE_URL
