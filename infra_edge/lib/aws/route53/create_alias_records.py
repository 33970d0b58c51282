from pulumi import Input, ResourceOptions
from pulumi_aws import cloudfront, route53

from infra_edge.lib.utils import slug_from_domain

ALIAS_RECORD_TYPES = ("A", "AAAA")
"""Record types created for every name, one per address family"""


def create_alias_records(
    name: str,
    zone_id: Input[str],
    record_names: list[str],
    distribution: cloudfront.Distribution,
    opts: ResourceOptions = None,
) -> list[route53.Record]:
    """
    Creates A and AAAA alias records pointing every name at a CloudFront distribution

    Resource names are ``{name}-{type}-record-{slug}``, e.g. ``site-aaaa-record-www-example-com``.

    :param name: Prefix for the record resource names
    :param zone_id: Hosted zone the records live in
    :param record_names: Domain names to point at the distribution
    :param distribution: Target distribution
    :param opts: Resource options, usually the parent
    :return: The records, two per name
    """
    return [
        route53.Record(
            f"{name}-{record_type.lower()}-record-{slug_from_domain(record_name)}",
            name=record_name,
            zone_id=zone_id,
            type=record_type,
            aliases=[
                route53.RecordAliasArgs(
                    name=distribution.domain_name,
                    zone_id=distribution.hosted_zone_id,
                    evaluate_target_health=True,
                )
            ],
            opts=opts,
        )
        for record_name in record_names
        for record_type in ALIAS_RECORD_TYPES
    ]
