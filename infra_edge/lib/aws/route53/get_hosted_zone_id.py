from typing import Optional

from pulumi import Input, InvokeOptions, Output, log
from pulumi_aws import route53


def get_hosted_zone_id(zone_name: Input[str], opts: Optional[InvokeOptions] = None) -> Output[str]:
    """
    Look up the id of the public hosted zone named ``zone_name``

    The name must match the zone exactly, parent zones are not searched.
    A missing zone fails the invoke, and with it every output depending on the id.

    :param zone_name: Name of the hosted zone (example.com)
    :param opts: Invoke options, set ``parent`` to inherit the caller's provider
    :return: Zone id
    """
    log.debug(f"looking up hosted zone `{zone_name}`")

    return route53.get_zone_output(name=zone_name, private_zone=False, opts=opts).zone_id
