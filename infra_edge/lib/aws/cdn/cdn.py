from typing import Optional

from pulumi import ComponentResource, Input, InvokeOptions, Output, ResourceOptions, log
from pulumi_aws import cloudfront

from infra_edge.lib.aws.certificate import DnsValidatedCertificate
from infra_edge.lib.aws.provider import use_provider, CLOUDFRONT_CERTIFICATE_REGION
from infra_edge.lib.aws.redirect import HttpsRedirect
from infra_edge.lib.aws.route53 import create_alias_records, get_hosted_zone_id
from infra_edge.lib.utils import transform
from .config import CdnArgs, CdnDomainArgs, normalize_domain, unwrap_domain


def _require_domain(domain) -> CdnDomainArgs:
    normalized = normalize_domain(domain)
    if normalized is None:
        raise ValueError("The domain output resolved to nothing, leave `domain` unset to disable it.")
    return normalized


class Cdn(ComponentResource):
    """
    A CloudFront distribution with an optional custom domain.

    With a domain, the component also creates:

    - an ACM certificate in us-east-1, validated through the domain's hosted zone
    - A and AAAA alias records for the domain and its aliases
    - an HTTPS redirect from every redirect domain to the domain

    Origins are left to the caller, set them with the ``distribution`` transform.
    """

    def __init__(self, name: str, args: CdnArgs, opts: ResourceOptions = None):
        # validate before anything gets registered, unless the domain depends on outputs
        domain_input = unwrap_domain(args.domain)
        if isinstance(domain_input, Output):
            domain = domain_input.apply(_require_domain)
        elif (normalized := normalize_domain(domain_input)) is not None:
            domain = Output.from_input(normalized)
        else:
            domain = None

        super().__init__(
            f"pkg:edge:aws:{self.__class__.__name__.lower()}",
            name,
            None,
            opts,
        )

        self._name = name
        self._args = args
        self._domain: Optional[Output[CdnDomainArgs]] = domain

        self._zone_id = self._lookup_hosted_zone_id()
        certificate = self._create_ssl()
        self.distribution = self._create_distribution(certificate)
        self._create_route53_records()
        self._create_redirects()

        self.url: Output[str] = Output.concat("https://", self.distribution.domain_name)

        self.domain_url: Optional[Output[str]] = (
            domain.apply(lambda d: f"https://{d.domain_name}") if domain is not None else None
        )

        self.register_outputs(
            {
                "url": self.url,
                "domain_url": self.domain_url,
                "distribution_id": self.distribution.id,
            }
        )

    def _lookup_hosted_zone_id(self) -> Optional[Output[str]]:
        if self._domain is None:
            return None

        def resolve(domain: CdnDomainArgs) -> Input[str]:
            if domain.hosted_zone_id:
                return domain.hosted_zone_id

            return get_hosted_zone_id(
                domain.hosted_zone or domain.domain_name,
                opts=InvokeOptions(parent=self),
            )

        return self._domain.apply(resolve)

    def _create_ssl(self) -> Optional[DnsValidatedCertificate]:
        if self._domain is None or self._zone_id is None:
            return None

        return DnsValidatedCertificate(
            f"{self._name}-ssl",
            domain_name=self._domain.apply(lambda d: d.domain_name),
            alternative_names=self._domain.apply(lambda d: d.aliases),
            zone_id=self._zone_id,
            tags=self._args.tags,
            opts=ResourceOptions(parent=self, provider=use_provider(CLOUDFRONT_CERTIFICATE_REGION)),
        )

    def _create_distribution(self, certificate: Optional[DnsValidatedCertificate]) -> cloudfront.Distribution:
        if certificate is not None:
            viewer_certificate = cloudfront.DistributionViewerCertificateArgs(
                acm_certificate_arn=certificate.certificate_arn,
                ssl_support_method="sni-only",
            )
        else:
            viewer_certificate = cloudfront.DistributionViewerCertificateArgs(
                cloudfront_default_certificate=True,
            )

        distribution_args = {
            "enabled": True,
            # placeholder, origins are attached by the caller
            "origins": [],
            "default_cache_behavior": cloudfront.DistributionDefaultCacheBehaviorArgs(
                allowed_methods=[],
                cached_methods=[],
                target_origin_id="placeholder",
                viewer_protocol_policy="redirect-to-https",
            ),
            "restrictions": cloudfront.DistributionRestrictionsArgs(
                geo_restriction=cloudfront.DistributionRestrictionsGeoRestrictionArgs(
                    restriction_type="none",
                ),
            ),
            "aliases": self._domain.apply(lambda d: d.record_names) if self._domain is not None else [],
            "viewer_certificate": viewer_certificate,
            "tags": self._args.tags,
        }

        return cloudfront.Distribution(
            f"{self._name}-distribution",
            **transform(self._args.transform.distribution, distribution_args),
            opts=ResourceOptions(parent=self),
        )

    def _create_route53_records(self) -> None:
        if self._domain is None or self._zone_id is None:
            return

        self._domain.apply(
            lambda domain: create_alias_records(
                self._name,
                zone_id=self._zone_id,
                record_names=domain.record_names,
                distribution=self.distribution,
                opts=ResourceOptions(parent=self),
            )
        )

    def _create_redirects(self) -> None:
        if self._domain is None or self._zone_id is None:
            return

        def create(domain: CdnDomainArgs) -> Optional[HttpsRedirect]:
            if not domain.redirects:
                log.debug(f"no redirects configured for `{domain.domain_name}`")
                return None

            return HttpsRedirect(
                f"{self._name}-redirect",
                zone_id=self._zone_id,
                source_domains=domain.redirects,
                target_domain=domain.domain_name,
                tags=self._args.tags,
                opts=ResourceOptions(parent=self),
            )

        self._domain.apply(create)
