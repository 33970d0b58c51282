from functools import cache

from pulumi import log
from pulumi_aws import Provider

CLOUDFRONT_CERTIFICATE_REGION = "us-east-1"
"""CloudFront only accepts ACM certificates issued in this region"""


@cache
def use_provider(region: str) -> Provider:
    """Get the AWS provider for a region, creating it on first use

    One provider is created per region and program, every caller asking for the same region shares it.

    :param region: AWS region
    :return: The provider
    """
    log.debug(f"creating aws provider for region `{region}`")

    return Provider(f"aws-provider-{region}", region=region)
