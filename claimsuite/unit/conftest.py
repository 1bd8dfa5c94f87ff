from pathlib import Path

import pytest

from claimsuite.ui_testing.data.claim_data import Credentials
from claimsuite.ui_testing.framework.config_loader import BrowserSettings, ConfigLoader, Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        base_url="http://portal.test",
        timeout=1000,
        users={
            "claimant": Credentials(role="claimant", username="claimant@email.com", password="secret"),
        },
        browser=BrowserSettings(),
        artifacts_dir=tmp_path / "artifacts",
    )


@pytest.fixture
def clean_config(monkeypatch):
    """Isolate ConfigLoader from the real config file and the caller's env."""
    for name in (
        "CLAIMS_CONFIG",
        "APPLICATION_BASEURL",
        "APPLICATION_TIMEOUT",
        "APPLICATION_REQUIREPORTAL",
        "BROWSER_TYPE",
        "BROWSER_HEADLESS",
        "BROWSER_TRACE",
        "BROWSER_SLOWMO",
        "USERS_CLAIMANT_USERNAME",
        "USERS_CLAIMANT_PASSWORD",
        "ARTIFACTS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
