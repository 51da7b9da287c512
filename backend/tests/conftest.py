import pytest


@pytest.fixture(autouse=True)
def demo_env(monkeypatch, tmp_path):
    """Simulation mode with no delay, state kept under tmp_path."""
    monkeypatch.delenv("CHAT_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("CHAT_GREETING", raising=False)
    monkeypatch.delenv("CHAT_WEBHOOK_TIMEOUT", raising=False)
    monkeypatch.setenv("CHAT_SIMULATION_DELAY", "0")
    monkeypatch.setenv("CHAT_STATE_PATH", str(tmp_path / "state.json"))
