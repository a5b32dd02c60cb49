from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file, write_user_env_vars


def test_defaults_target_lab_host():
    settings = AppSettings()
    assert str(settings.target_ip) == "192.168.1.1"
    assert settings.target_port == 12345
    assert settings.target_mac == "ff:ff:ff:ff:ff:ff"
    assert settings.interface == "eth0"
    assert settings.interval_seconds == 1.0
    assert settings.required_tools == ("hping3", "arping")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("NETPULSE_TARGET_IP", "10.0.0.7")
    monkeypatch.setenv("NETPULSE_TARGET_PORT", "80")
    monkeypatch.setenv("NETPULSE_USE_SUDO", "false")
    settings = AppSettings()
    assert str(settings.target_ip) == "10.0.0.7"
    assert settings.target_port == 80
    assert settings.use_sudo is False


def test_project_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("NETPULSE_INTERFACE=wlan0\n", encoding="utf-8")
    assert AppSettings().interface == "wlan0"


@pytest.mark.parametrize(
    "field, value",
    [
        ("target_port", 0),
        ("target_port", 70000),
        ("target_ip", "not-an-ip"),
        ("target_mac", "ff:ff:ff"),
        ("interval_seconds", 0),
        ("interface", ""),
        ("log_level", "LOUD"),
    ],
)
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        AppSettings(**{field: value})


def test_log_level_is_normalised():
    assert AppSettings(log_level=" debug ").log_level == "DEBUG"


def test_write_user_env_vars_merges(tmp_path):
    path = write_user_env_vars({"NETPULSE_TARGET_IP": "10.0.0.1"})
    write_user_env_vars({"NETPULSE_INTERFACE": "br0"})

    assert path == get_user_env_file()
    assert path.is_relative_to(tmp_path)
    text = path.read_text(encoding="utf-8")
    assert "NETPULSE_TARGET_IP=10.0.0.1" in text
    assert "NETPULSE_INTERFACE=br0" in text


def test_user_env_file_follows_config_dir_at_construction(tmp_path, monkeypatch):
    assert AppSettings().target_port == 12345

    write_user_env_vars({"NETPULSE_TARGET_PORT": "99"})
    assert AppSettings().target_port == 99

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "elsewhere"))
    assert AppSettings().target_port == 12345


def test_user_env_file_overrides_project_env_file(tmp_path):
    write_user_env_vars({"NETPULSE_INTERFACE": "br0"})
    (tmp_path / ".env").write_text("NETPULSE_INTERFACE=wlan0\n", encoding="utf-8")

    assert AppSettings().interface == "br0"
