import sys
import types

import pydantic
import pytest

from journeykit.conf import CONFIG_ENVVAR, Settings, select_keys
from journeykit.components.tests import TestMetadata
from journeykit.registry import RegistrySet


def test_select_keys():
    mapping = {"FOO": 1, "BAR": 2, "NS_X": 3, "NS_Y": 4, "lower": 5}
    assert select_keys(mapping, None) == {"FOO": 1, "BAR": 2, "NS_X": 3, "NS_Y": 4}
    assert select_keys(mapping, "NS") == {"X": 3, "Y": 4}


def test_defaults_are_layered_under_overrides():
    settings = Settings({"TEST_ID_WIDTH": 4})

    assert settings["TEST_ID_PLACEHOLDER"] == "UNRESOLVED"
    assert settings["TEST_ID_WIDTH"] == 4

    settings["TEST_ID_WIDTH"] = 5
    assert settings["TEST_ID_WIDTH"] == 5
    del settings["TEST_ID_WIDTH"]
    assert settings["TEST_ID_WIDTH"] == 4


def test_settings_update_from_object_and_envvar(monkeypatch):
    module = types.ModuleType("journeykit_temp_conf")
    module.WARN_ON_UNRESOLVED = False
    module.JK_TEST_ID_PLACEHOLDER = "PENDING"
    module.lowercase_ignored = True
    monkeypatch.setitem(sys.modules, "journeykit_temp_conf", module)

    settings = Settings()
    settings.update_from_object("journeykit_temp_conf")
    assert settings["WARN_ON_UNRESOLVED"] is False
    assert "lowercase_ignored" not in settings

    settings.update_from_object("journeykit_temp_conf", namespace="JK")
    assert settings["TEST_ID_PLACEHOLDER"] == "PENDING"

    env_module = types.ModuleType("journeykit_env_conf")
    env_module.DEFAULT_HANDLER_PRIORITY = 7
    monkeypatch.setitem(sys.modules, "journeykit_env_conf", env_module)
    monkeypatch.setenv(CONFIG_ENVVAR, "journeykit_env_conf")

    settings.update_from_envvar()
    assert settings["DEFAULT_HANDLER_PRIORITY"] == 7


def test_update_from_envvar_without_variable_is_noop(monkeypatch):
    monkeypatch.delenv(CONFIG_ENVVAR, raising=False)
    settings = Settings()
    assert settings.update_from_envvar() is False
    assert settings.as_dict()["TEST_ID_WIDTH"] == 3


def test_typed_view_validates_values():
    typed = Settings().typed()
    assert typed.TEST_ID_WIDTH == 3
    assert typed.DEFAULT_HANDLER_PRIORITY == 0

    with pytest.raises(pydantic.ValidationError):
        Settings({"TEST_ID_WIDTH": "wide"}).typed()


def test_registry_set_settings_drive_id_generation():
    registries = RegistrySet(Settings({"TEST_ID_PLACEHOLDER": "PENDING", "TEST_ID_WIDTH": 2}))

    entry = registries.tests.register(TestMetadata(name="orphan"))

    assert entry.key == "PENDING-TEST-01"


def test_typed_view_is_rebuilt_after_writes():
    settings = Settings()
    first = settings.typed()
    assert settings.typed() is first

    settings.update_from_mapping({"JK_WARN_ON_UNRESOLVED": False}, namespace="JK")
    assert settings.typed() is not first
    assert settings.typed().WARN_ON_UNRESOLVED is False


def test_registries_reject_invalid_configuration():
    registries = RegistrySet(Settings({"TEST_ID_WIDTH": 0}))

    with pytest.raises(pydantic.ValidationError):
        registries.tests.register(TestMetadata(name="orphan"))
    assert registries.tests.count() == 0
