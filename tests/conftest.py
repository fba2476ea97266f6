"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks for ports)
    │   ├── domain/
    │   ├── application/
    │   ├── services/
    │   ├── presentation/
    │   └── config/
    └── integration/       # SQLite in-memory persistence and API tests
        ├── persistence/
        └── api/

Environment Variables:
    RUN_SLOW=1           Run @pytest.mark.slow tests

Pytest Options:
    --run-slow           Run slow tests
"""

import os

import pytest

# Settings require a JWT secret; provide one before anything loads them.
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")

from tessera_config import clear_settings_cache  # noqa: E402


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.slow",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that exercise persistence or the HTTP layer",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip slow tests unless explicitly enabled."""
    run_slow = config.getoption("--run-slow") or os.environ.get(
        "RUN_SLOW",
        "",
    ).lower() in ("1", "true", "yes")

    if run_slow:
        return

    skip_slow = pytest.mark.skip(
        reason="Slow test - run with --run-slow or RUN_SLOW=1",
    )

    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "slow" in item_markers:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Clear cached settings around every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
