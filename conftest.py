import socket

import pytest


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    """Fail loudly if any test opens a real socket; HTTP goes through httpx.MockTransport."""

    def refuse_connection(*args, **kwargs):
        raise RuntimeError("Network access is disabled in tests")

    monkeypatch.setattr(socket, "create_connection", refuse_connection)
