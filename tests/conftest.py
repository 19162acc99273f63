import pytest


class RecordingResolver:
    """UrlResolver double that records every call."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def content(self, path):
        self.calls.append(path)
        if self.result is not None:
            return self.result
        return "/approot" + path[1:]


@pytest.fixture
def resolver():
    return RecordingResolver()


@pytest.fixture
def make_resolver():
    return RecordingResolver


@pytest.fixture
def encoder():
    """Encoder that marks what it escaped instead of escaping it."""

    def encode(text):
        return f"HtmlEncode[[{text}]]"

    return encode
