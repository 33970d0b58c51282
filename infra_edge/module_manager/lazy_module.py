import inspect
from dataclasses import dataclass
from functools import cached_property
from importlib import import_module
from typing import Type, Optional

from pulumi import log, ResourceOptions

from infra_edge.lib.base import BaseModule, ExportsType
from infra_edge.lib.config import get_stack_config


@dataclass
class LazyModule:
    """
    A stack module found on disk, imported the first time its class is needed.
    """

    provider: str
    """Provider directory of the module (aws)"""

    name: str
    """Python package name of the module (cdn)"""

    @property
    def path(self) -> str:
        return f".modules.{self.provider}.{self.name}"

    @cached_property
    def Module(self) -> Type[BaseModule]:
        """The concrete ``BaseModule`` subclass exported by the package"""
        log.debug(f"importing module `infra_edge{self.path}`")

        package = import_module(self.path, "infra_edge")

        for _, member in inspect.getmembers(package, inspect.isclass):
            if issubclass(member, BaseModule) and not inspect.isabstract(member):
                log.debug(f"found module class `{member.__name__}`")
                return member

        raise ModuleNotFoundError(f"`infra_edge{self.path}` does not export a subclass of `{BaseModule.__name__}`")

    def run(self, stack_name: str, opts: Optional[ResourceOptions] = None) -> ExportsType:
        """Build the module for a stack

        The configuration is read from the Pulumi config namespace named after the stack.

        :param stack_name: Stack name, also the name of the module component
        :param opts: Forwarded to the module component
        :return: The module's exports
        """
        config = get_stack_config(stack=stack_name, config_cls=self.Module.get_config_type())

        log.debug(f"running module `{self.provider}/{self.name}` for stack `{stack_name}`")

        return self.Module(name=stack_name, config=config, opts=opts).run()
