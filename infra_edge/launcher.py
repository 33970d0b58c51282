import logging
import os

from pulumi import get_stack, log, export

from infra_edge.lib.config import get_module_override
from infra_edge.module_manager import module_manager


def run_stack(provider: str, stack_name: str) -> None:
    """Build the module of a stack and export its outputs under the stack name

    The module is the one named after the stack. Stacks sharing a module (several distributions from the ``cdn``
    module) name it with ``edge:module`` in their stack config.

    :param provider: A provider
    :param stack_name: The stack name
    :return: None
    """
    module_name = get_module_override() or stack_name

    log.debug(f"stack `{stack_name}` uses module `{provider}/{module_name}`")

    exports = module_manager.get_module(provider, module_name).run(stack_name)

    export(stack_name, exports)


def run_active_stack(provider: str) -> None:
    """Build the module of the stack being deployed, the entrypoint of every sysenv program

    Example ``edge.py``::

        from infra_edge.launcher import run_active_stack

        run_active_stack("aws")

    :param provider: A provider
    :return: None
    """
    run_stack(provider, get_stack())


# The config layer loads Edge.common.yaml when imported, the log level has to be set first
if os.getenv("EDGE_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    logging.debug("edge debug logging enabled")
