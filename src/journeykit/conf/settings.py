"""Layered configuration for a :class:`~journeykit.registry.RegistrySet`.

Keys are upper-case names. Lookups walk explicit assignments first, then the
layers given to the constructor, then :data:`~journeykit.conf.models.DEFAULTS`.
Registries do not read raw keys: they use :meth:`Settings.typed`, which
validates the merged mapping once and is rebuilt after the next write.
"""

import importlib
import os
from collections import ChainMap
from typing import Any, Iterator, Mapping, MutableMapping

from .models import DEFAULTS, JourneyKitSettings

CONFIG_ENVVAR = "JOURNEYKIT_CONFIG_MODULE"


def select_keys(source: Mapping[str, Any], namespace: str | None = None) -> dict[str, Any]:
    """
    Pick the configuration keys out of ``source``.

    Without a namespace every upper-case key is kept. With one, only
    ``"<NAMESPACE>_<KEY>"`` entries are kept and returned as ``KEY``.
    """
    if namespace is None:
        return {key: value for key, value in source.items() if key.isupper()}
    prefix = f"{namespace}_"
    return {key.removeprefix(prefix): value for key, value in source.items() if key.startswith(prefix)}


class Settings(MutableMapping[str, Any]):
    def __init__(self, *layers: Mapping[str, Any]) -> None:
        self._layers = ChainMap({}, *(dict(layer) for layer in layers), dict(DEFAULTS))
        self._typed: JourneyKitSettings | None = None

    def __getitem__(self, key: str) -> Any:
        return self._layers[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._layers.maps[0][key] = value
        self._typed = None

    def __delitem__(self, key: str) -> None:
        del self._layers.maps[0][key]
        self._typed = None

    def __iter__(self) -> Iterator[str]:
        return iter(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    # --- loading ---

    def update_from_mapping(self, mapping: Mapping[str, Any], *, namespace: str | None = None) -> None:
        self._layers.maps[0].update(select_keys(mapping, namespace))
        self._typed = None

    def update_from_object(self, dotted_path: str, *, namespace: str | None = None) -> None:
        """Load the configuration keys of the module at ``dotted_path``."""
        self.update_from_mapping(vars(importlib.import_module(dotted_path)), namespace=namespace)

    def update_from_envvar(self, envvar: str = CONFIG_ENVVAR, *, namespace: str | None = None) -> bool:
        """Load the module named by ``envvar``; returns ``False`` when it is unset."""
        dotted_path = os.environ.get(envvar)
        if not dotted_path:
            return False
        self.update_from_object(dotted_path, namespace=namespace)
        return True

    # --- views ---

    def as_dict(self) -> dict[str, Any]:
        return dict(self._layers)

    def typed(self) -> JourneyKitSettings:
        """
        The merged mapping validated by :class:`JourneyKitSettings`.

        :raises pydantic.ValidationError: if a known key holds an invalid value.
        """
        if self._typed is None:
            self._typed = JourneyKitSettings.model_validate(self.as_dict())
        return self._typed
