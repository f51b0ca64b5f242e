import json

import pytest
import requests

from crowdin_client import CrowdinClient, CrowdinConfig
from crowdin_client.config import reset_default_config


def make_response(body=None, status=200, content=None, url="https://api.crowdin.com/api/"):
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.encoding = "utf-8"
    if content is None:
        content = json.dumps({"success": True} if body is None else body).encode("utf-8")
    response._content = content
    return response


class FakeSession:
    """Records every request and answers from a queue of prepared responses."""

    def __init__(self):
        self.calls = []
        self.responses = []
        self.closed = False

    def queue(self, response):
        self.responses.append(response)

    def request(self, method, url, **kwargs):
        call = {"method": method, "url": url, **kwargs}
        # Multipart parts without a filename are plain form fields
        call["data"] = {}
        call["uploaded"] = {}
        call["handles"] = []
        for name, (filename, value) in kwargs.get("files") or []:
            if filename is None and name.endswith("[]"):
                call["data"].setdefault(name, []).append(value)
            elif filename is None:
                call["data"][name] = value
            else:
                call["uploaded"][name] = (filename, value.read())
                call["handles"].append(value)
        self.calls.append(call)
        if self.responses:
            response = self.responses.pop(0)
        else:
            response = make_response()
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("CROWDIN_API_KEY", "CROWDIN_BASE_URL", "CROWDIN_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    reset_default_config()
    yield
    reset_default_config()


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def config():
    return CrowdinConfig(api_key="secret", base_url="https://crowdin.test")


@pytest.fixture
def client(config, session):
    return CrowdinClient(config, session=session)
