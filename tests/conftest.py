"""Pytest configuration and fixtures."""

import pytest

import krypton


class FakeResponse:
    """Stand-in for requests.Response with a fixed status and body."""

    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


@pytest.fixture(autouse=True)
def no_pause(monkeypatch):
    """Skip the cosmetic sleeps."""
    monkeypatch.setattr(krypton.time, "sleep", lambda seconds: None)


@pytest.fixture
def market_payload():
    """Messari market-data payload for BTC."""
    return {
        "data": {
            "symbol": "BTC",
            "name": "Bitcoin",
            "market_data": {
                "price_usd": 12345.6789,
                "percent_change_usd_last_24_hours": 2.5,
            },
        }
    }


@pytest.fixture
def fake_get(monkeypatch):
    """Patches requests.get to return (or raise) a canned result and record calls."""
    calls = []

    def install(result):
        def get(url, **kwargs):
            calls.append((url, kwargs))
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(krypton.requests, "get", get)
        return calls

    return install


@pytest.fixture
def feed_input(monkeypatch):
    """
    Answers input() prompts from a list, then raises KeyboardInterrupt
    so the endless menu loop can be stopped.
    """
    prompts = []

    def install(answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return install
