import logging
import sys
from collections import UserDict
from pathlib import Path
from typing import Optional

import hiyapyco

logger = logging.getLogger(__name__)


class EdgeConfigException(Exception):
    def __init__(self, key):
        super().__init__(f"Missing required configuration variable '{key}'")


def _entrypoint_dir() -> Path:
    main_module = sys.modules["__main__"]
    if not hasattr(main_module, "__file__"):
        raise EdgeConfigException("__main__.__file__ (Edge.common.yaml is looked up from the entrypoint)")

    return Path(main_module.__file__).absolute().parent


class HierarchicalConfig(UserDict):
    """
    Settings shared by the stacks of an organisation (namespace, team, purpose, phase, tag namespace).

    ``Edge.common.yaml`` files are collected from the directory of the program up to the repository root, at most
    ``limit`` directories, and merged with HiYaPyCo. Files closer to the program win, so a sysenv directory can
    override the ``phase`` of the repository wide file::

        # sysenvs/Edge.common.yaml
        namespace: ex
        team: web
        phase: dev

        # sysenvs/aws/ex-aws-us-east-1-sandbox-prod/Edge.common.yaml
        phase: prod

    Example usage:
        from infra_edge.lib.config import edge_env

        edge_env.get("tag_namespace", "edge")
        edge_env.require("team")

    """

    def __init__(self, start: Optional[Path] = None, limit=5, filename="Edge.common.yaml"):
        """
        :param start: Directory to start from, defaults to the directory of the ``__main__`` module
        :param limit: Max directories to look in, ``start`` included
        :param filename: Filename to find and merge
        """
        super().__init__()
        self.filename = filename

        # hiyapyco merges left to right, the most specific file goes last
        configs = list(reversed(self._discover_configs(start or _entrypoint_dir(), limit)))

        if configs:
            logger.debug("Merging %s", configs)
            self.data = hiyapyco.load([str(path) for path in configs]) or {}
        else:
            logger.debug("No %s found", self.filename)

    def require(self, key: str) -> any:
        """
        Get a key of the configuration, raising an `EdgeConfigException` when it is missing or empty

        :param key: Key to look up
        :return: The value
        """
        if value := self.get(key):
            return value

        raise EdgeConfigException(key)

    def _discover_configs(self, start: Path, limit: int) -> list[Path]:
        """
        Config files from ``start`` upwards, closest first

        :param start: First directory to look in
        :param limit: Max directories to look in
        :return: Paths of the config files found
        """
        config_paths = []

        for path in [start, *start.parents][:limit]:
            candidate = path / self.filename
            if candidate.exists():
                logger.debug("Detected config [%s]", candidate)
                config_paths.append(candidate)

            # a config may live at the repository root, never above it
            if (path / ".git").is_dir():
                break

        return config_paths


# Singleton, to avoid loading and merging configuration multiple times on import
edge_env = HierarchicalConfig()
