from .resource_links import Resource, ResourceLinks, ResourceNotLinkedError, inject_links, ENV_PREFIX
