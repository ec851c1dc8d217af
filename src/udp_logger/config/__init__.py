"""Config – settings for building a UDP sink (used by the CLI, not the core)."""
from udp_logger.config.settings import EnvSettingsLoader, Settings, SettingsLoader, UdpLoggerSettings
from udp_logger.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "UdpLoggerSettings",
]
