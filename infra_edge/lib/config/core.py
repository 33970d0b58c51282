from functools import cache
from typing import Optional

from pulumi import Config, get_stack, get_project

from .edge_env import edge_env

aws_config = Config("aws")
edge_config = Config("edge")

tag_namespace = edge_env.get("tag_namespace", "edge")
"""Resources tagged with the tagging library use this to prefix the standard tags."""

tag_prefix = f"{tag_namespace}{edge_env.get('tag_separator', ':')}"


def get_region() -> str:
    """
    Retrieve the AWS region of this program
    :return: region
    """
    return aws_config.require("region")


@cache
def get_team() -> str:
    return edge_env.require("team")


def get_purpose() -> str:
    return edge_env.require("purpose")


def get_phase() -> str:
    return edge_env.require("phase")


@cache
def get_sysenv() -> str:
    """
    Returns the SysEnv name for this program
    SysEnvs are named `{namespace}-aws-{region}-{purpose}-{phase}`.

    An example SysEnv name is `ex-aws-us-east-1-sandbox-dev`

    Can be overridden by setting `sysenv` in your Edge.common.yaml

    :return: SysEnv name
    """
    if config_sysenv := edge_env.get("sysenv"):
        return config_sysenv

    namespace = edge_env.require("namespace")

    return f"{namespace}-aws-{get_region()}-{get_purpose()}-{get_phase()}"


def get_module_override() -> Optional[str]:
    """
    Retrieve the module override for the current stack (`edge:module: cdn`)

    :return: Module name, if set
    """
    return edge_config.get("module")
