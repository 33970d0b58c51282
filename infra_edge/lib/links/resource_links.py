import json
import logging
import os
from collections.abc import Mapping
from typing import Any, Iterator, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "EDGE_RESOURCE_"
"""Environment variables named ``EDGE_RESOURCE_<name>`` hold the JSON encoded value of the resource ``<name>``"""

_injected_links: dict[str, Any] = {}


class ResourceNotLinkedError(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f'"{self.name}" is not linked'


def inject_links(links: Mapping[str, Any]) -> None:
    """
    Add resources to the process wide link table

    Meant to be called once by the runtime at startup, before any lookup.

    :param links: Mapping of resource names to their values
    """
    logger.debug("Injecting links %s", sorted(links))
    _injected_links.update(links)


class ResourceLinks(Mapping):
    """
    Read-only lookup of the resources linked to this process.

    Values come from ``EDGE_RESOURCE_<name>`` environment variables first, then from the process wide link table.

    Example usage:
        from infra_edge.lib.links import Resource

        bucket_name = Resource["MyBucket"]["name"]

    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, links: Optional[Mapping[str, Any]] = None):
        """
        :param environ: Environment to read, defaults to ``os.environ``
        :param links: Fallback link table, defaults to the process wide one
        """
        self._links = _injected_links if links is None else links
        self._env = {}

        for key, value in (os.environ if environ is None else environ).items():
            # an empty variable links nothing, the link table applies
            if not key.startswith(ENV_PREFIX) or not value:
                continue

            try:
                self._env[key.removeprefix(ENV_PREFIX)] = json.loads(value)
            except json.decoder.JSONDecodeError as e:
                raise ValueError(f"`{key}` does not hold valid JSON: {e}") from e

        logger.debug("Loaded links %s from the environment", sorted(self._env))

    def __getitem__(self, name: str) -> Any:
        if name in self._env:
            return self._env[name]
        if name in self._links:
            return self._links[name]

        raise ResourceNotLinkedError(name)

    def __iter__(self) -> Iterator[str]:
        yield from self._env
        yield from (name for name in self._links if name not in self._env)

    def __len__(self) -> int:
        return len(set(self._env) | set(self._links))


# Singleton, the environment is read once at startup
Resource = ResourceLinks()
