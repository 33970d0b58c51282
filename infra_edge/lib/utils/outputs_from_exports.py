from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from pulumi import get_stack


def _serializable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _serializable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [_serializable(v) for v in value]
    if isinstance(value, dict):
        return {k: _serializable(v) for k, v in value.items()}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, type):
        raise TypeError(f"cannot export the class `{value.__name__}`, export an instance")

    # Outputs and plain values are serialized by the engine
    return value


def outputs_from_exports(exports: Any) -> dict:
    """Turn a module's exports into component outputs keyed by the stack name

    Dataclasses become dicts (recursively), enums their values.

    Example::

        outputs_from_exports(CdnExports(url=..., domain_url=None, ...))
        # {"site": {"url": ..., "domain_url": None, ...}}

    :param exports: The exports dataclass of a module, or a list of them
    :return: The outputs to register
    """
    return {get_stack(): _serializable(exports)}
