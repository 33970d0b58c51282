from dataclasses import dataclass, field
from typing import Optional, Union

from pulumi import Output

from infra_edge.lib.aws.cdn import CdnDomainArgs
from .types import OriginProtocolPolicy, PriceClass


@dataclass
class CdnOrigin:
    origin_id: str
    """Unique identifier of the origin, referenced by cache behaviors"""

    domain_name: str
    """DNS name of the origin (api.example.com, my-alb-123.us-east-1.elb.amazonaws.com)"""

    origin_path: Optional[str] = None
    """Path CloudFront prepends to requests sent to the origin (/static)"""

    origin_protocol_policy: OriginProtocolPolicy = OriginProtocolPolicy.https_only
    """Whether to use 'http-only', 'https-only' or 'match-viewer' towards the origin"""


@dataclass
class CdnConfig:
    domain: Optional[Union[str, CdnDomainArgs]] = None
    """Custom domain, either a domain name or a full domain config. Leave unset to use the CloudFront domain."""

    origins: list[CdnOrigin] = field(default_factory=list)
    """Origins served by the distribution"""

    default_origin_id: Optional[str] = None
    """Origin of the default cache behavior. Defaults to the first origin."""

    default_root_object: Optional[str] = None
    """Object returned for requests to the root URL (index.html)"""

    price_class: PriceClass = PriceClass.price_class_100
    """Edge locations serving the distribution: 'PriceClass_All', 'PriceClass_200' or 'PriceClass_100'"""


@dataclass
class CdnExports:
    url: Output[str]
    """CloudFront URL of the distribution"""

    domain_url: Optional[Output[str]]
    """URL under the custom domain, unset without a domain"""

    distribution_id: Output[str]
    """Id of the distribution"""

    distribution_domain_name: Output[str]
    """CloudFront domain name of the distribution (d111111abcdef8.cloudfront.net)"""
