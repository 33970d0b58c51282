import re

_non_alphanumeric = re.compile(r"[^a-z0-9]+")


def slug_from_domain(domain: str) -> str:
    """Convert a domain name to a kebab case string usable in resource names

    Wildcard labels are spelled out so ``*.example.com`` and ``example.com`` do not collide.

    Example::

        slug_from_domain("www.Example.com")  # "www-example-com"
        slug_from_domain("*.example.com")  # "wildcard-example-com"

    :param domain: A domain name
    :return: String in kebab case
    """
    return _non_alphanumeric.sub("-", domain.lower().replace("*", "wildcard")).strip("-")
