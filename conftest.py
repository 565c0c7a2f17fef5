import logging

import pytest

from elearning_cli.registry import Registry
from elearning_cli.seed import seed_demo_data
from elearning_cli.utils import logging_config


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Point log files at a temp dir and restore root handlers afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setattr(
        logging_config,
        "_logging_config",
        logging_config.LoggingConfig(str(tmp_path / "logs")),
    )
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def seeded_registry():
    registry = Registry()
    seed_demo_data(registry)
    return registry
