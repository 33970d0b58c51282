from pulumi import log

from .discover_modules import discover_modules
from .lazy_module import LazyModule


class _ModuleManager:
    """Hands out the stack modules found at import time."""

    def __init__(self):
        self.modules = discover_modules()

        log.debug(f"discovered modules `{self.modules}`")

    def get_module(self, provider: str, module_name: str) -> LazyModule:
        """Look up a module without importing it

        :param provider: Provider name (aws)
        :param module_name: Module name in kebab case (cdn)
        :return: A LazyModule
        """
        try:
            return self.modules[provider][module_name]
        except KeyError:
            available = sorted(self.modules.get(provider, {}))
            raise ModuleNotFoundError(
                f"module `{module_name}` was not found under provider `{provider}`, available modules are {available}"
            ) from None


module_manager = _ModuleManager()
