import pathlib

import pytest

from wistia_kit import WistiaClient

DATA = pathlib.Path(__file__).parent / "data"
API_PASSWORD = "abc1234567890"


class FakeTransport:
    """Answers every request synchronously with a canned (body, error) pair."""

    def __init__(self):
        self.sent = []
        self.replies = {}
        self.closed = False

    def reply(self, path, body=None, error=None):
        self.replies[path] = (body, error)

    def send(self, request, completion):
        self.sent.append(request)
        body, error = self.replies.get(request.path, (None, None))
        completion(body, error)

    def close(self):
        self.closed = True


@pytest.fixture
def load_fixture():
    def _load(name):
        return (DATA / name).read_bytes()
    return _load


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def wistia(transport):
    return WistiaClient(API_PASSWORD, transport=transport)
