import pytest
import requests

import urlcheck


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code


@pytest.fixture()
def data_file(tmp_path):
    """Results file inside tmp_path so tests never touch the real one."""
    return tmp_path / "url_checks.json"


@pytest.fixture()
def fake_get(monkeypatch):
    """Replace requests.get with a recorder.
    - Set `.status_code` to change the answer, or `.error` to raise instead
    - Requested URLs end up in `.calls`
    """
    class _FakeGet:
        def __init__(self):
            self.status_code = 200
            self.error = None
            self.calls = []

        def __call__(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if self.error is not None:
                raise self.error
            return FakeResponse(self.status_code)

    fake = _FakeGet()
    monkeypatch.setattr(urlcheck.requests, "get", fake)
    return fake


@pytest.fixture()
def feed_input(monkeypatch):
    """Answer input() prompts from a list, in order."""
    def _feed(*answers):
        it = iter(answers)

        def _input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None
        monkeypatch.setattr("builtins.input", _input)
    return _feed


@pytest.fixture()
def connection_error():
    return requests.exceptions.ConnectionError("Name or service not known")
