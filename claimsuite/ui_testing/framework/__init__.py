"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the claims portal.

Components:
    - config_loader: YAML + env configuration, validated Settings
    - log_setup: Loguru configuration
    - smart_locator: Element location with fallback strategies
    - page_base: Base page object for common operations
    - browser_manager: Browser and per-test session lifecycle
    - reporting: Allure attachment helpers

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, Settings, load_settings
from .smart_locator import SmartLocator, ElementNotFoundError
from .page_base import BasePage
from .browser_manager import BrowserManager, BrowserSessionError, Session

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "Settings",
    "load_settings",
    "SmartLocator",
    "ElementNotFoundError",
    "BasePage",
    "BrowserManager",
    "BrowserSessionError",
    "Session",
]
