from abc import ABC, abstractmethod
from typing import Type, get_type_hints

from pulumi import ComponentResource, ResourceOptions, log

from infra_edge.lib.base.types import ConfigType, ExportsType
from infra_edge.lib.utils import outputs_from_exports


class BaseModule(ComponentResource, ABC):
    """
    A stack module: a component built from one stack's configuration.

    Subclasses name their provider and implement ``build``. The type hint of the ``config`` parameter of ``build``
    is the dataclass the stack configuration is mapped onto.

    Example::

        class ContentDelivery(AWSModule):
            def build(self, config: CdnConfig) -> CdnExports:
                ...

    The component type is ``pkg:edge:{provider}:{class name}``, ``pkg:edge:aws:contentdelivery`` above.
    """

    @property
    @abstractmethod
    def provider(self) -> str:
        """Name of the provider, the directory the module lives in under ``infra_edge/modules``"""

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(self.resource_type(), name, None, opts)

        self._name = name
        self._config = config

    @classmethod
    def resource_type(cls) -> str:
        return f"pkg:edge:{cls.provider}:{cls.__name__.lower()}"

    @classmethod
    def get_config_type(cls) -> Type[ConfigType]:
        """The dataclass ``build`` expects its config as"""
        hints = get_type_hints(cls.build)

        if "config" not in hints:
            raise TypeError(f"`{cls.__name__}.build` needs a type hint for its `config` parameter")

        return hints["config"]

    def run(self) -> ExportsType:
        """Build the module and register its exports as the component outputs

        :return: The exports of ``build``
        """
        exports = self.build(self._config)

        log.debug(f"module `{self._name}` exports {type(exports).__name__}")

        self.register_outputs(outputs_from_exports(exports))

        return exports

    @abstractmethod
    def build(self, config: ConfigType) -> ExportsType:
        """Create the resources of the module

        :param config: The stack configuration
        :return: An exports dataclass
        """
