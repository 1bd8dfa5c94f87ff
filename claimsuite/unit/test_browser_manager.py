from dataclasses import replace

import pytest

from claimsuite.ui_testing.framework.browser_manager import BrowserManager, BrowserSessionError
from claimsuite.ui_testing.framework.config_loader import BrowserSettings
from claimsuite.unit.fakes import FakeBrowser


@pytest.fixture
def manager(settings):
    manager = BrowserManager(settings)
    manager._browser = FakeBrowser()
    return manager


@pytest.mark.asyncio
async def test_new_session_is_isolated_and_configured(manager, settings):
    first = await manager.new_session("test_one")
    second = await manager.new_session("test_two")

    assert first.context is not second.context
    assert first.context.default_timeout == settings.timeout
    assert first.context.navigation_timeout == settings.timeout
    assert first.context.options["viewport"] == {"width": 1920, "height": 1080}
    assert first.context.options["base_url"] == "http://portal.test"
    assert first.context.tracing.started
    assert manager.open_sessions == [first, second]


@pytest.mark.asyncio
async def test_context_options_can_be_overridden(manager):
    session = await manager.new_session("mobile", viewport={"width": 390, "height": 844})

    assert session.context.options["viewport"] == {"width": 390, "height": 844}


@pytest.mark.asyncio
async def test_passing_test_leaves_no_artifacts(manager, settings):
    session = await manager.new_session("test_pass")

    await manager.close(session, failed=False)

    assert session.closed
    assert session.context.closed
    assert session.context.tracing.stopped_with == [None]
    assert session.artifacts == []
    assert not settings.artifacts_dir.exists()
    assert manager.open_sessions == []


@pytest.mark.asyncio
async def test_failed_test_keeps_screenshot_and_trace(manager, settings):
    session = await manager.new_session("claimsuite/tests/test_auto_claims.py::test_submit")

    await manager.close(session, failed=True)

    names = sorted(path.name for path in session.artifacts)
    assert names == [
        "claimsuite_tests_test_auto_claims_py__test_submit.png",
        "claimsuite_tests_test_auto_claims_py__test_submit_trace.zip",
    ]
    assert all(path.parent == settings.artifacts_dir and path.exists() for path in session.artifacts)
    assert session.context.closed


@pytest.mark.asyncio
async def test_failed_test_without_tracing_keeps_screenshot_only(settings):
    manager = BrowserManager(replace(settings, browser=BrowserSettings(trace=False)))
    manager._browser = FakeBrowser()
    session = await manager.new_session("test_no_trace")

    await manager.close(session, failed=True)

    assert [path.suffix for path in session.artifacts] == [".png"]
    assert session.context.tracing.stopped_with == []


@pytest.mark.asyncio
async def test_close_twice_is_noop(manager):
    session = await manager.new_session("test_twice")

    await manager.close(session)
    await manager.close(session, failed=True)

    assert session.artifacts == []
    assert session.context.tracing.stopped_with == [None]


@pytest.mark.asyncio
async def test_context_failure_raises_session_error(settings):
    manager = BrowserManager(settings)
    manager._browser = FakeBrowser(fail_with=RuntimeError("browser has been closed"))

    with pytest.raises(BrowserSessionError, match="browser has been closed"):
        await manager.new_session("test_broken")

    assert manager.open_sessions == []


@pytest.mark.asyncio
async def test_session_requires_started_browser(settings):
    with pytest.raises(BrowserSessionError, match="not started"):
        await BrowserManager(settings).new_session()


@pytest.mark.asyncio
async def test_close_all_releases_sessions_and_browser(manager):
    browser = manager.browser
    sessions = [await manager.new_session(f"test_{i}") for i in range(3)]

    await manager.close_all()

    assert all(session.closed for session in sessions)
    assert browser.closed
    assert manager.browser is None
