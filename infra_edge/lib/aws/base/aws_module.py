from abc import ABC

from pulumi import ResourceOptions

from infra_edge.lib.base import BaseModule, ConfigType
from infra_edge.lib.config import get_region


class AWSModule(BaseModule, ABC):
    """
    Base class for edge modules using the AWS provider
    """

    provider: str = "aws"

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(name, config, opts)

        self.region = get_region()
