import pytest

from order_service.config import get_port, get_service_env


def test_port_default():
    assert get_port() == 8080


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    assert get_port() == 9090


@pytest.mark.parametrize("value", ["http", "0", "70000"])
def test_invalid_port(monkeypatch, value):
    monkeypatch.setenv("PORT", value)
    with pytest.raises(ValueError):
        get_port()


def test_service_env_used_verbatim(monkeypatch):
    monkeypatch.setenv("SERVICE_ENV", "Prod-EU")
    assert get_service_env() == "Prod-EU"


def test_service_env_default(monkeypatch):
    monkeypatch.delenv("SERVICE_ENV")
    assert get_service_env() == "local"
