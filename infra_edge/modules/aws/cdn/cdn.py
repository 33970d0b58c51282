from functools import partial

from pulumi import ResourceOptions, get_stack, log
from pulumi_aws import cloudfront

from infra_edge.lib.aws.base import AWSModule
from infra_edge.lib.aws.cdn import Cdn, CdnArgs, CdnTransforms
from infra_edge.lib.tags import get_tags
from .config import CdnConfig, CdnExports, CdnOrigin

# AWS managed "CachingOptimized" cache policy
CACHING_OPTIMIZED_POLICY_ID = "658327ea-f89d-4fab-a63d-7e88639e58f6"


class ContentDelivery(AWSModule):
    def build(self, config: CdnConfig) -> CdnExports:
        origin_ids = [origin.origin_id for origin in config.origins]
        if config.default_origin_id and config.default_origin_id not in origin_ids:
            raise ValueError(f"default origin `{config.default_origin_id}` is not one of the origins {origin_ids}")

        log.debug(f"building distribution `{self._name}` with origins {origin_ids} from `{self.region}`")

        cdn = Cdn(
            self._name,
            CdnArgs(
                domain=config.domain,
                transform=CdnTransforms(distribution=partial(self._configure_distribution, config)),
                tags=get_tags(get_stack(), "distribution"),
            ),
            opts=ResourceOptions(parent=self),
        )

        return CdnExports(
            url=cdn.url,
            domain_url=cdn.domain_url,
            distribution_id=cdn.distribution.id,
            distribution_domain_name=cdn.distribution.domain_name,
        )

    def _configure_distribution(self, config: CdnConfig, args: dict) -> None:
        """
        Attaches the configured origins to the distribution, and the distribution wide settings.
        """
        args["is_ipv6_enabled"] = True
        args["price_class"] = config.price_class.value
        args["default_root_object"] = config.default_root_object

        if not config.origins:
            return

        args["origins"] = [self._origin_args(origin) for origin in config.origins]
        args["default_cache_behavior"] = cloudfront.DistributionDefaultCacheBehaviorArgs(
            target_origin_id=config.default_origin_id or config.origins[0].origin_id,
            viewer_protocol_policy="redirect-to-https",
            allowed_methods=["GET", "HEAD", "OPTIONS"],
            cached_methods=["GET", "HEAD"],
            compress=True,
            cache_policy_id=CACHING_OPTIMIZED_POLICY_ID,
        )

    def _origin_args(self, origin: CdnOrigin) -> cloudfront.DistributionOriginArgs:
        return cloudfront.DistributionOriginArgs(
            origin_id=origin.origin_id,
            domain_name=origin.domain_name,
            origin_path=origin.origin_path,
            custom_origin_config=cloudfront.DistributionOriginCustomOriginConfigArgs(
                http_port=80,
                https_port=443,
                origin_protocol_policy=origin.origin_protocol_policy.value,
                origin_ssl_protocols=["TLSv1.2"],
            ),
        )
