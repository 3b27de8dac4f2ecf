import logging

import pytest

from journeykit.registry import push_registry_set


@pytest.fixture
def registries():
    """A fresh, active registry set per test."""
    with push_registry_set() as active:
        yield active


@pytest.fixture
def journeykit_caplog(caplog):
    caplog.set_level(logging.DEBUG, logger="journeykit")
    return caplog
