"""Config settings – dataclass settings and the environment loader."""
from udp_logger.config.settings.base import Settings, UdpLoggerSettings
from udp_logger.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader", "UdpLoggerSettings"]
