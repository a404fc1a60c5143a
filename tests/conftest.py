"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest

KEY = "056d016a-3d9d-4630-bbc4-2c7f6e0f67cc"


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """CLI tests reconfigure the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _no_key_in_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's real IndexNow key out of the tests."""
    monkeypatch.delenv("INDEXNOW_API_KEY_NAME", raising=False)


@pytest.fixture
def site_yml(tmp_path: Path) -> Path:
    """Create a valid site.yml in a temp directory."""
    content = textwrap.dedent("""\
        site: https://example.pages.dev
        output: server
        adapter: cloudflare
    """)
    path = tmp_path / "site.yml"
    path.write_text(content)
    return path


@pytest.fixture
def site_yml_with_key(tmp_path: Path) -> Path:
    """Create a site.yml that carries the IndexNow key itself."""
    content = textwrap.dedent(f"""\
        site: https://example.pages.dev/
        output: server
        adapter: cloudflare
        indexnow:
          key: {KEY}
    """)
    path = tmp_path / "site.yml"
    path.write_text(content)
    return path
