import json

import pytest
from requests import Response
from requests.adapters import BaseAdapter


class RecordingAdapter(BaseAdapter):
    """Transport adapter that records prepared requests and replays canned responses."""

    def __init__(self, responses=None):
        super().__init__()
        self.responses = list(responses or [])
        self.requests = []
        self.closed = False

    def queue(self, status_code, body=""):
        self.responses.append((status_code, body))

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        status_code, body = self.responses.pop(0) if self.responses else (200, "")
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        resp = Response()
        resp.status_code = status_code
        resp._content = body.encode("utf-8") if isinstance(body, str) else body
        resp.encoding = "utf-8"
        resp.url = request.url
        resp.request = request
        resp.reason = "OK" if status_code < 400 else "ERROR"
        return resp

    def close(self):
        self.closed = True

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def adapter():
    return RecordingAdapter()


@pytest.fixture
def mount(adapter):
    def configure(session):
        session.mount("http://", adapter)
        session.mount("https://", adapter)
    return configure
