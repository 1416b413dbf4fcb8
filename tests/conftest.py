"""
Shared pytest fixtures and configuration for glogkit tests.

This module provides:
- Isolation of the process-wide default backend
- Isolation of the root logger (handlers, level) and configure_logging state
- A MemoryBackend fixture for asserting on emitted records
- A StringIO-backed "default" handler for end-to-end rendering tests
"""

import io
import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Ensure glogkit package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import glogkit.config as log_config
from glogkit.backends import DEFAULT_HANDLER, LoggingBackend, MemoryBackend, get_backend, set_backend


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        if "integration" in Path(item.fspath).name:
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Restore the default backend, root logger and GLOG_* environment after each test."""
    for key in ("GLOG_LEVEL", "GLOG_FORMAT", "GLOG_HANDLER_NAME", "GLOG_STREAM"):
        monkeypatch.delenv(key, raising=False)

    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    saved_backend = get_backend()
    log_config._configured = False

    yield

    # pytest's own capture handlers are unnamed
    for handler in list(root.handlers):
        if handler not in saved_handlers and handler.name:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
    set_backend(saved_backend)
    log_config._configured = False


@pytest.fixture
def memory_backend() -> MemoryBackend:
    """MemoryBackend installed as the default backend."""
    backend = MemoryBackend()
    set_backend(backend)
    return backend


@pytest.fixture
def default_handler() -> Generator[tuple[logging.Handler, io.StringIO], None, None]:
    """A handler named "default" on the root logger writing to a StringIO.

    The root logger and handler let everything through; tests lower the
    thresholds through the backend adapter.
    """
    buffer = io.StringIO()
    handler = logging.StreamHandler(buffer)
    handler.set_name(DEFAULT_HANDLER)
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(1)
    set_backend(LoggingBackend())
    yield handler, buffer
    root.removeHandler(handler)
    handler.close()
