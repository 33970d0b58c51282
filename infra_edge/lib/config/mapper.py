import json
from dataclasses import fields
from enum import Enum
from typing import Type, Any

from dacite import from_dict, Config as DaciteConfig
from pulumi import Config, log

from infra_edge.lib.base import ConfigType


def _parse_args_value(value: Any) -> Any:
    """Parse and return json values if valid json, else return original value

    :param value: A potential json string
    :return: Parsed json object or raw arg
    """
    try:
        return json.loads(value)
    except (json.decoder.JSONDecodeError, TypeError):
        return value


def get_raw_stack_config(stack: str, config_cls: Type[ConfigType]) -> dict:
    """Read each field of ``config_cls`` from the Pulumi config namespace named after the stack

    Fields that are not set are left out, the dataclass defaults apply to them.

    :param stack: Name of the stack
    :param config_cls: The dataclass for the config
    :return: dict
    """
    stack_config = Config(stack)

    config = {
        f.name: _parse_args_value(value)
        for f in fields(config_cls)
        if (value := stack_config.get(f.name)) is not None
    }

    log.debug(f"config dict for stack `{stack}` is {config}")

    return config


def config_from_dict(config_cls: Type[ConfigType], data: dict) -> ConfigType:
    """Map a dict onto a config dataclass

    Uses `dacite <https://github.com/konradhalas/dacite>`_, strictly: unknown keys are rejected.

    :param config_cls: The dataclass for the config
    :param data: Raw configuration
    :return: An instance of ``config_cls``
    """
    return from_dict(
        data_class=config_cls,
        data=data,
        config=DaciteConfig(
            cast=[Enum],
            strict=True,
        ),
    )


def get_stack_config(stack: str, config_cls: Type[ConfigType]) -> ConfigType:
    """Get a stack config in dataclass form

    :param stack: Name of the stack
    :param config_cls: The dataclass for the config
    :return: The stack config expressed in the module's config dataclass
    """
    config = config_from_dict(config_cls, get_raw_stack_config(stack, config_cls))

    log.debug(f"config for stack `{stack}` is {config}")

    return config
