"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser instance per worker process
    - One isolated context (cookies, storage) per test session
    - Unconditional release of the context after each test
    - Screenshot and trace capture when a test fails

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .config_loader import Settings
from .reporting import artifact_name, attach_file


class BrowserSessionError(Exception):
    """Raised when a browsing context or page cannot be created."""
    pass


@dataclass
class Session:
    """
    An isolated browsing context with a single page, owned by one test.

    Attributes:
        name: Test identifier, used for artifact file names
        context: Playwright BrowserContext
        page: Playwright Page inside the context
        tracing: Whether Playwright tracing was started for this context
        closed: Set once the context has been released
        artifacts: Files captured at close (screenshot, trace)
    """
    name: str
    context: BrowserContext
    page: Page
    tracing: bool = False
    closed: bool = False
    artifacts: List[Path] = field(default_factory=list)


class BrowserManager:
    """
    Manages the browser instance and per-test sessions.

    Usage:
        async with BrowserManager(settings) as manager:
            session = await manager.new_session("test_submit_claim")
            try:
                await session.page.goto(settings.base_url)
            finally:
                await manager.close(session, failed=False)
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "ignore_https_errors": True,
        "accept_downloads": True,
    }

    def __init__(self, settings: Settings):
        """
        Initialize browser manager.

        Args:
            settings: Validated suite settings (browser options, timeout,
                artifacts directory)
        """
        self.settings = settings
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._sessions: List[Session] = []

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close sessions and browser."""
        await self.close_all()

    async def start(self) -> None:
        """Start Playwright and launch the configured browser."""
        browser_settings = self.settings.browser
        self._playwright = await async_playwright().start()

        if browser_settings.type == "firefox":
            browser_launcher = self._playwright.firefox
        elif browser_settings.type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": browser_settings.headless,
            "slow_mo": browser_settings.slow_mo,
        }
        if browser_settings.type != "chromium":
            launch_options.pop("args")

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {browser_settings.type} "
            f"(headless={browser_settings.headless})"
        )

    async def new_session(self, name: str = "session", **options: Any) -> Session:
        """
        Create an isolated browsing context with one page.

        Each context is isolated - separate cookies, localStorage, etc.
        Creation failures are not retried.

        Args:
            name: Test identifier for logs and artifact names
            **options: Extra context options (override defaults)

        Returns:
            New Session

        Raises:
            BrowserSessionError: When the browser is not started or the
                context/page cannot be created
        """
        if not self._browser:
            raise BrowserSessionError("Browser not started. Call start() first.")

        context_options = {
            **self.DEFAULT_CONTEXT_OPTIONS,
            "viewport": dict(self.settings.browser.viewport),
            "base_url": self.settings.base_url,
            **options,
        }

        try:
            context = await self._browser.new_context(**context_options)
        except Exception as e:
            raise BrowserSessionError(f"Failed to create browser context for {name}: {e}") from e

        try:
            context.set_default_timeout(self.settings.timeout)
            context.set_default_navigation_timeout(self.settings.timeout)

            tracing = self.settings.browser.trace
            if tracing:
                await context.tracing.start(screenshots=True, snapshots=True, sources=False)

            page = await context.new_page()
        except Exception as e:
            await context.close()
            raise BrowserSessionError(f"Failed to open page for {name}: {e}") from e

        session = Session(name=name, context=context, page=page, tracing=tracing)
        self._sessions.append(session)
        logger.debug(f"Session opened: {name}")
        return session

    async def close(self, session: Session, failed: bool = False) -> None:
        """
        Release a session's context.

        The context is closed even when artifact capture fails. Closing an
        already closed session does nothing.

        Args:
            session: Session to release
            failed: Capture a screenshot and keep the trace for debugging
        """
        if session.closed:
            return

        try:
            if failed:
                await self._capture_artifacts(session)
            elif session.tracing:
                await session.context.tracing.stop()
        finally:
            session.closed = True
            if session in self._sessions:
                self._sessions.remove(session)
            await session.context.close()
            logger.debug(f"Session closed: {session.name} (failed={failed})")

    async def _capture_artifacts(self, session: Session) -> None:
        """Save screenshot and trace for a failed test and attach them to Allure."""
        artifacts_dir = self.settings.artifacts_dir
        artifacts_dir.mkdir(parents=True, exist_ok=True)
        base_name = artifact_name(session.name)

        if not session.page.is_closed():
            screenshot_path = artifacts_dir / f"{base_name}.png"
            await session.page.screenshot(path=str(screenshot_path), full_page=True)
            session.artifacts.append(screenshot_path)
            attach_file(screenshot_path, name="failure_screenshot")

        if session.tracing:
            trace_path = artifacts_dir / f"{base_name}_trace.zip"
            await session.context.tracing.stop(path=str(trace_path))
            session.artifacts.append(trace_path)
            attach_file(trace_path, name="playwright_trace")

        logger.error(
            f"Test failed: {session.name}. Artifacts: "
            f"{', '.join(str(p) for p in session.artifacts) or 'none'}"
        )

    async def close_all(self) -> None:
        """Close all open sessions, the browser and Playwright."""
        for session in list(self._sessions):
            await self.close(session)

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser

    @property
    def open_sessions(self) -> List[Session]:
        return list(self._sessions)


__all__ = [
    "BrowserManager",
    "BrowserSessionError",
    "Session",
]
