from .core import (
    get_sysenv,
    get_purpose,
    get_phase,
    get_region,
    get_stack,
    get_project,
    get_team,
    get_module_override,
    tag_namespace,
    tag_prefix,
)
from .edge_env import edge_env, EdgeConfigException
from .mapper import get_stack_config, config_from_dict
