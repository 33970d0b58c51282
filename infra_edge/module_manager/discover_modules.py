from pathlib import Path

from pulumi import log

from infra_edge.lib.utils import kebab_from_snake
from .lazy_module import LazyModule

_modules_path = Path(__file__).resolve().parent.parent / "modules"


def _packages(path: Path) -> list[Path]:
    """Sub-packages of ``path``, skipping private ones (``_deprecated``, ``__pycache__``)"""
    return sorted(p for p in path.iterdir() if p.is_dir() and not p.name.startswith("_"))


def discover_modules(modules_path: Path = _modules_path) -> dict[str, dict[str, LazyModule]]:
    """Find the stack modules of the package

    A module lives in ``infra_edge/modules/{provider}/{module}``. It is keyed by the kebab case form of its
    directory name, so a ``https_redirect`` directory is the ``https-redirect`` module.

    Example::

        # infra_edge
        # └── modules
        #     └── aws
        #         └── cdn

        {"aws": {"cdn": LazyModule(provider='aws', name='cdn')}}

    Nothing is imported here, see ``LazyModule``.

    :param modules_path: Directory holding one package per provider
    :return: Modules by provider and name
    """
    log.debug(f"looking for modules in `{modules_path}`")

    return {
        provider.name: {
            kebab_from_snake(module.name): LazyModule(provider.name, module.name) for module in _packages(provider)
        }
        for provider in _packages(modules_path)
    }
