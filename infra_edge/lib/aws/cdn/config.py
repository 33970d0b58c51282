from collections import Counter
from dataclasses import dataclass, field, fields, replace
from typing import Optional, Union

from pulumi import Input, Output

from infra_edge.lib.utils import Transform, slug_from_domain


@dataclass
class CdnDomainArgs:
    domain_name: str
    """The domain assigned to the distribution (example.com)"""

    aliases: list[str] = field(default_factory=list)
    """Other domains routed to the distribution (app2.example.com)"""

    redirects: list[str] = field(default_factory=list)
    """Domains redirected to ``domain_name`` (www.example.com)"""

    hosted_zone: Optional[str] = None
    """Name of the Route 53 hosted zone containing the domain. Defaults to ``domain_name``.
    Do not set both ``hosted_zone`` and ``hosted_zone_id``."""

    hosted_zone_id: Optional[str] = None
    """Id of the Route 53 hosted zone containing the domain, skips the lookup by name.
    Do not set both ``hosted_zone`` and ``hosted_zone_id``."""

    @property
    def record_names(self) -> list[str]:
        """Every name routed to the distribution, primary domain first"""
        return [self.domain_name, *self.aliases]


@dataclass
class CdnTransforms:
    distribution: Optional[Transform] = None
    """Applied to the keyword arguments of the CloudFront distribution, after the defaults are computed"""


@dataclass
class CdnArgs:
    domain: Optional[Input[Union[str, CdnDomainArgs, dict]]] = None
    """Custom domain. Leave unset to serve from the CloudFront domain only."""

    transform: CdnTransforms = field(default_factory=CdnTransforms)
    """Overrides for the resources created"""

    tags: Optional[dict] = None
    """Tags for the distribution and certificates"""


_domain_fields = {f.name for f in fields(CdnDomainArgs)}


def _holds_output(value) -> bool:
    if isinstance(value, Output):
        return True
    if isinstance(value, (list, tuple)):
        return any(_holds_output(v) for v in value)
    return False


def unwrap_domain(domain: Input[Union[str, dict, CdnDomainArgs]]) -> Input[Union[str, dict, CdnDomainArgs]]:
    """Turn a domain option with ``Output`` fields into an ``Output`` of plain fields

    Any field of a dict or a ``CdnDomainArgs``, or an item of its lists, may be an ``Output``. Options without
    outputs are returned as is, so they can be validated right away.

    :param domain: The domain option, as given by the caller
    :return: The option itself, or an ``Output`` resolving to a dict of its fields
    """
    if isinstance(domain, CdnDomainArgs):
        values = {f.name: getattr(domain, f.name) for f in fields(CdnDomainArgs)}
    elif isinstance(domain, dict):
        values = domain
    else:
        return domain

    if not any(_holds_output(v) for v in values.values()):
        return domain

    return Output.from_input(values)


def normalize_domain(domain: Union[None, str, dict, CdnDomainArgs]) -> Optional[CdnDomainArgs]:
    """Canonicalize a domain option

    A string is the domain name. A dict uses the field names of ``CdnDomainArgs``. List fields of the result are fresh
    lists, so normalizing twice gives an equal value.

    :param domain: The domain option, as given by the caller
    :return: ``None`` when no domain is configured, else a fully populated ``CdnDomainArgs``
    :raises ValueError: When the domain option is invalid
    """
    if domain is None:
        return None

    if isinstance(domain, str):
        domain = CdnDomainArgs(domain_name=domain)
    elif isinstance(domain, dict):
        if unknown := sorted(set(domain) - _domain_fields):
            raise ValueError(f"Unknown domain options {unknown}.")
        if not domain.get("domain_name"):
            raise ValueError('Missing "domain_name" for domain.')
        domain = CdnDomainArgs(**domain)
    elif not isinstance(domain, CdnDomainArgs):
        raise ValueError(f"Unsupported domain option of type `{type(domain).__name__}`.")

    if not domain.domain_name:
        raise ValueError('Missing "domain_name" for domain.')
    if domain.hosted_zone and domain.hosted_zone_id:
        raise ValueError('Do not set both "hosted_zone" and "hosted_zone_id".')

    normalized = replace(
        domain,
        aliases=list(domain.aliases or []),
        redirects=list(domain.redirects or []),
    )

    # record resource names are derived from the slug, redirect records live under their own prefix
    for names in (normalized.record_names, normalized.redirects):
        slugs = Counter(slug_from_domain(name) for name in names)
        if duplicates := [name for name in names if slugs[slug_from_domain(name)] > 1]:
            raise ValueError(f"Domain names {duplicates} are duplicates of each other.")

    return normalized
