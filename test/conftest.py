import logging

import pytest

from tuplestore.schema.engine.config import config


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the default configuration."""
    config.reset()
    yield
    config.reset()
    logging.getLogger("tuplestore").setLevel(logging.NOTSET)
