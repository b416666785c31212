"""Shared fixtures for updatescout tests (no network required)."""

import pytest
import structlog

from updatescout.engines.update_checker.models import UpdateRecord


@pytest.fixture(scope="session", autouse=True)
def _structlog_via_stdlib():
    """Route structlog through stdlib logging so stdout stays clean for CLI tests."""
    structlog.configure(
        processors=[structlog.processors.KeyValueRenderer(key_order=["event"])],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_update():
    def _make(
        name: str,
        current: str = "1.0.0",
        latest: str = "2.0.0",
        doc_url: str = "https://docs",
    ) -> UpdateRecord:
        return UpdateRecord(
            name=name, current_version=current, latest_version=latest, doc_url=doc_url
        )

    return _make
