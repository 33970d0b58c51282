from typing import Optional

from pulumi import ComponentResource, Input, ResourceOptions, log
from pulumi_aws import cloudfront

from infra_edge.lib.aws.certificate import DnsValidatedCertificate
from infra_edge.lib.aws.provider import use_provider, CLOUDFRONT_CERTIFICATE_REGION
from infra_edge.lib.aws.route53 import create_alias_records

_REDIRECT_ORIGIN_ID = "redirect"

_REDIRECT_FUNCTION_CODE = """\
function handler(event) {
    var request = event.request;
    var query = Object.keys(request.querystring)
        .map(function (key) {
            return key + "=" + request.querystring[key].value;
        })
        .join("&");

    return {
        statusCode: 301,
        statusDescription: "Moved Permanently",
        headers: {
            location: { value: "https://%(target_domain)s" + request.uri + (query ? "?" + query : "") },
        },
    };
}
"""


def redirect_function_code(target_domain: str) -> str:
    """
    CloudFront function answering every viewer request with a permanent redirect to ``target_domain``

    The path and the query string of the request are kept.

    :param target_domain: Domain to redirect to
    :return: JavaScript source for the ``cloudfront-js-2.0`` runtime
    """
    return _REDIRECT_FUNCTION_CODE % {"target_domain": target_domain}


class HttpsRedirect(ComponentResource):
    """
    Redirects a set of domains to a target domain over HTTPS.

    Creates a certificate for the source domains, a CloudFront distribution whose viewer-request function answers
    with a 301, and A/AAAA alias records for every source domain.
    """

    def __init__(
        self,
        name: str,
        zone_id: Input[str],
        source_domains: list[str],
        target_domain: str,
        tags: Optional[dict] = None,
        opts: ResourceOptions = None,
    ):
        super().__init__(
            f"pkg:edge:aws:{self.__class__.__name__.lower()}",
            name,
            None,
            opts,
        )

        if not source_domains:
            raise ValueError(f"redirect `{name}` needs at least one source domain")

        log.debug(f"redirecting {source_domains} to `{target_domain}`")

        self.certificate = DnsValidatedCertificate(
            f"{name}-ssl",
            domain_name=source_domains[0],
            alternative_names=source_domains[1:],
            zone_id=zone_id,
            tags=tags,
            opts=ResourceOptions(parent=self, provider=use_provider(CLOUDFRONT_CERTIFICATE_REGION)),
        )

        self.function = cloudfront.Function(
            f"{name}-function",
            runtime="cloudfront-js-2.0",
            comment=f"Redirect to {target_domain}",
            code=redirect_function_code(target_domain),
            publish=True,
            opts=ResourceOptions(parent=self),
        )

        self.distribution = cloudfront.Distribution(
            f"{name}-distribution",
            enabled=True,
            is_ipv6_enabled=True,
            aliases=source_domains,
            # never contacted, the function answers every request
            origins=[
                cloudfront.DistributionOriginArgs(
                    origin_id=_REDIRECT_ORIGIN_ID,
                    domain_name=target_domain,
                    custom_origin_config=cloudfront.DistributionOriginCustomOriginConfigArgs(
                        http_port=80,
                        https_port=443,
                        origin_protocol_policy="https-only",
                        origin_ssl_protocols=["TLSv1.2"],
                    ),
                )
            ],
            default_cache_behavior=cloudfront.DistributionDefaultCacheBehaviorArgs(
                target_origin_id=_REDIRECT_ORIGIN_ID,
                viewer_protocol_policy="redirect-to-https",
                allowed_methods=["GET", "HEAD"],
                cached_methods=["GET", "HEAD"],
                forwarded_values=cloudfront.DistributionDefaultCacheBehaviorForwardedValuesArgs(
                    query_string=True,
                    cookies=cloudfront.DistributionDefaultCacheBehaviorForwardedValuesCookiesArgs(
                        forward="none",
                    ),
                ),
                function_associations=[
                    cloudfront.DistributionDefaultCacheBehaviorFunctionAssociationArgs(
                        event_type="viewer-request",
                        function_arn=self.function.arn,
                    )
                ],
            ),
            restrictions=cloudfront.DistributionRestrictionsArgs(
                geo_restriction=cloudfront.DistributionRestrictionsGeoRestrictionArgs(
                    restriction_type="none",
                ),
            ),
            viewer_certificate=cloudfront.DistributionViewerCertificateArgs(
                acm_certificate_arn=self.certificate.certificate_arn,
                ssl_support_method="sni-only",
                minimum_protocol_version="TLSv1.2_2021",
            ),
            tags=tags,
            opts=ResourceOptions(parent=self),
        )

        self.records = create_alias_records(
            name,
            zone_id=zone_id,
            record_names=source_domains,
            distribution=self.distribution,
            opts=ResourceOptions(parent=self),
        )

        self.register_outputs({"distribution_id": self.distribution.id})
