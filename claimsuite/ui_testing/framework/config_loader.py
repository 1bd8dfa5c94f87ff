"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - YAML configuration loading (config/config.yaml or $CLAIMS_CONFIG)
    - Environment variable override (APPLICATION_BASEURL overrides application.baseUrl)
    - Dot notation path access
    - Typed, validated Settings for the UI suite (fail fast on missing fields)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from loguru import logger

from claimsuite.ui_testing.data.claim_data import Credentials


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

# Env var pointing to an alternate configuration file
CONFIG_PATH_ENV = "CLAIMS_CONFIG"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (APPLICATION_BASEURL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("application.baseUrl", "http://localhost:3000")
        'https://claims.example.com'  # From YAML or env var

        >>> config.get("application.timeout", 30000)
        30000  # Default value if not configured

    Environment Variable Mapping:
        - application.baseUrl -> APPLICATION_BASEURL
        - browser.headless -> BROWSER_HEADLESS
        - users.claimant.password -> USERS_CLAIMANT_PASSWORD
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """
        Singleton pattern - return existing instance if available.

        Configuration is loaded only once per process (per xdist worker).
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Falls back to $CLAIMS_CONFIG, then DEFAULT_CONFIG_PATH.
        """
        if getattr(self, "_initialized", False):
            return

        env_path = os.environ.get(CONFIG_PATH_ENV)
        self._config_path = Path(config_path or env_path or DEFAULT_CONFIG_PATH)
        self._load_config()
        self._initialized = True

    @property
    def config_path(self) -> Path:
        return self._config_path

    def resolve_path(self, value: Union[str, Path]) -> Path:
        """Resolve a configured path; relative paths are taken from the project root (parent of config/)."""
        path = Path(value)
        if path.is_absolute():
            return path
        return self._config_path.parent.parent / path

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "application.baseUrl")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire configuration section.

        Args:
            section: Section name (e.g., "users", "browser")

        Returns:
            Section dictionary or empty dict if not found
        """
        return self._config.get(section, {}) or {}

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


# =============================================================================
# Typed Settings
# =============================================================================

@dataclass(frozen=True)
class BrowserSettings:
    """Browser launch and context options."""
    type: str = "chromium"
    headless: bool = True
    viewport: Dict[str, int] = field(
        default_factory=lambda: {"width": 1920, "height": 1080}
    )
    slow_mo: int = 0
    trace: bool = True


@dataclass(frozen=True)
class Settings:
    """
    Validated settings consumed by the browser manager, page objects and fixtures.

    Attributes:
        base_url: Portal base URL without trailing slash
        timeout: Default wait timeout in milliseconds
        users: Role name -> credentials
        browser: Browser launch/context options
        artifacts_dir: Where failure screenshots and traces are written
        require_portal: Abort the run (instead of skipping UI tests) when
            the portal is unreachable
    """
    base_url: str
    timeout: int
    users: Dict[str, Credentials]
    browser: BrowserSettings
    artifacts_dir: Path
    require_portal: bool = False

    def credentials(self, role: str) -> Credentials:
        """Return credentials for a test role (claimant, adjuster, ...)."""
        try:
            return self.users[role]
        except KeyError:
            raise ConfigurationError(
                f"No credentials configured for role '{role}'. "
                f"Known roles: {', '.join(sorted(self.users)) or 'none'}"
            ) from None


# Roles every UI run needs
REQUIRED_ROLES = ("claimant",)


def _load_users(loader: ConfigLoader, missing: List[str]) -> Dict[str, Credentials]:
    roles = set(loader.get_section("users")) | set(REQUIRED_ROLES)
    users: Dict[str, Credentials] = {}

    for role in sorted(roles):
        username = loader.get(f"users.{role}.username")
        password = loader.get(f"users.{role}.password")
        if username and password:
            users[role] = Credentials(role=role, username=str(username), password=str(password))
            continue
        if role in REQUIRED_ROLES:
            if not username:
                missing.append(f"users.{role}.username")
            if not password:
                missing.append(f"users.{role}.password")
        else:
            logger.warning(f"Ignoring incomplete credentials for role: {role}")

    return users


def load_settings(loader: Optional[ConfigLoader] = None) -> Settings:
    """
    Build validated Settings from configuration.

    Args:
        loader: ConfigLoader to read from (process singleton if None)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: When required fields are missing or invalid.
            All missing fields are reported at once.
    """
    loader = loader or ConfigLoader()
    missing: List[str] = []

    base_url = loader.get("application.baseUrl")
    if not base_url:
        missing.append("application.baseUrl")

    users = _load_users(loader, missing)

    if missing:
        raise ConfigurationError(
            "Missing required configuration fields: " + ", ".join(missing)
        )

    browser_type = str(loader.get("browser.type", "chromium")).lower()
    if browser_type not in SUPPORTED_BROWSERS:
        raise ConfigurationError(
            f"Unsupported browser type '{browser_type}'. "
            f"Expected one of: {', '.join(SUPPORTED_BROWSERS)}"
        )

    viewport = loader.get("browser.viewport") or {}
    browser = BrowserSettings(
        type=browser_type,
        headless=loader.get("browser.headless", True),
        viewport={
            "width": int(viewport.get("width", 1920)),
            "height": int(viewport.get("height", 1080)),
        },
        slow_mo=loader.get("browser.slowMo", 0),
        trace=loader.get("browser.trace", True),
    )

    timeout = loader.get("application.timeout", 30000)
    if not isinstance(timeout, int) or timeout <= 0:
        raise ConfigurationError(
            f"application.timeout must be a positive integer (ms), got: {timeout!r}"
        )

    artifacts_dir = loader.resolve_path(loader.get("artifacts.dir", "reports/artifacts"))

    settings = Settings(
        base_url=str(base_url).rstrip("/"),
        timeout=timeout,
        users=users,
        browser=browser,
        artifacts_dir=artifacts_dir,
        require_portal=loader.get("application.requirePortal", False),
    )
    logger.debug(
        f"Settings loaded: base_url={settings.base_url}, "
        f"browser={browser.type} (headless={browser.headless}), "
        f"roles={sorted(users)}"
    )
    return settings


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "BrowserSettings",
    "Settings",
    "load_settings",
]
