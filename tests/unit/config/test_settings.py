"""Unit tests for UdpLoggerSettings and EnvSettingsLoader."""

from __future__ import annotations

import pytest

from udp_logger.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    UdpLoggerSettings,
)
from udp_logger.logging import Level


# ---------------------------------------------------------------------------
# UdpLoggerSettings
# ---------------------------------------------------------------------------


class TestUdpLoggerSettings:
    def test_defaults(self) -> None:
        s = UdpLoggerSettings(destination="127.0.0.1:1999")
        assert s.level == "INFO"
        assert s.buffered is True
        assert s.interval == 0.05
        assert s.threshold is Level.INFO

    def test_threshold_parses_level(self) -> None:
        assert UdpLoggerSettings(destination="h:1", level="warning").threshold is Level.WARN

    def test_destination_without_port_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            UdpLoggerSettings(destination="localhost")
        assert exc_info.value.setting_name == "destination"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            UdpLoggerSettings(destination="h:1", level="loud")
        assert exc_info.value.setting_name == "level"

    @pytest.mark.parametrize("interval", [0, -0.5])
    def test_non_positive_interval_rejected(self, interval: float) -> None:
        with pytest.raises(InvalidSettingValueError):
            UdpLoggerSettings(destination="h:1", interval=interval)

    def test_validation_errors_are_config_errors(self) -> None:
        with pytest.raises(ConfigError):
            UdpLoggerSettings(destination="")


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_prefixed_variables(self) -> None:
        loader = EnvSettingsLoader(
            {
                "UDP_LOGGER_DESTINATION": "10.0.0.5:514",
                "UDP_LOGGER_LEVEL": "debug",
                "UDP_LOGGER_BUFFERED": "false",
                "UDP_LOGGER_INTERVAL": "0.2",
            }
        )
        s = loader.load(UdpLoggerSettings)
        assert s.destination == "10.0.0.5:514"
        assert s.level == "debug"
        assert s.buffered is False
        assert s.interval == 0.2

    @pytest.mark.parametrize("raw", ["1", "true", "YES", "on"])
    def test_truthy_booleans(self, raw: str) -> None:
        s = EnvSettingsLoader({"UDP_LOGGER_DESTINATION": "h:1", "UDP_LOGGER_BUFFERED": raw}).load(UdpLoggerSettings)
        assert s.buffered is True

    def test_missing_destination(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(UdpLoggerSettings)
        assert exc_info.value.setting_name == "UDP_LOGGER_DESTINATION"

    def test_overrides_win_over_environment(self) -> None:
        loader = EnvSettingsLoader({"UDP_LOGGER_DESTINATION": "h:1", "UDP_LOGGER_LEVEL": "error"})
        s = loader.load(UdpLoggerSettings, level="trace", destination=None)
        assert s.level == "trace"
        assert s.destination == "h:1"

    def test_override_satisfies_required_field(self) -> None:
        s = EnvSettingsLoader({}).load(UdpLoggerSettings, destination="h:2")
        assert s.destination == "h:2"

    def test_uncoercible_value(self) -> None:
        loader = EnvSettingsLoader({"UDP_LOGGER_DESTINATION": "h:1", "UDP_LOGGER_INTERVAL": "soon"})
        with pytest.raises(InvalidSettingValueError) as exc_info:
            loader.load(UdpLoggerSettings)
        assert exc_info.value.setting_name == "UDP_LOGGER_INTERVAL"

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UDP_LOGGER_DESTINATION", "127.0.0.1:7")
        assert EnvSettingsLoader().load(UdpLoggerSettings).destination == "127.0.0.1:7"
