import dacite
import pytest

from infra_edge.lib.aws.cdn import CdnDomainArgs
from infra_edge.lib.config import config_from_dict
from infra_edge.lib.config.mapper import _parse_args_value
from infra_edge.modules.aws.cdn.config import CdnConfig, CdnOrigin
from infra_edge.modules.aws.cdn.types import OriginProtocolPolicy, PriceClass


class TestConfigFromDict:
    def test_defaults(self):
        config = config_from_dict(CdnConfig, {})

        assert config.domain is None
        assert config.origins == []
        assert config.price_class is PriceClass.price_class_100

    def test_domain_name(self):
        assert config_from_dict(CdnConfig, {"domain": "example.com"}).domain == "example.com"

    def test_domain_options(self):
        config = config_from_dict(
            CdnConfig,
            {"domain": {"domain_name": "example.com", "redirects": ["www.example.com"], "hosted_zone": "example.com"}},
        )

        assert config.domain == CdnDomainArgs(
            domain_name="example.com",
            redirects=["www.example.com"],
            hosted_zone="example.com",
        )

    def test_enums_are_cast(self):
        config = config_from_dict(
            CdnConfig,
            {
                "origins": [
                    {"origin_id": "app", "domain_name": "app.example.com", "origin_protocol_policy": "http-only"},
                ],
                "price_class": "PriceClass_All",
            },
        )

        assert config.origins == [
            CdnOrigin(
                origin_id="app",
                domain_name="app.example.com",
                origin_protocol_policy=OriginProtocolPolicy.http_only,
            )
        ]
        assert config.price_class is PriceClass.all

    def test_unknown_keys_are_rejected(self):
        with pytest.raises(dacite.UnexpectedDataError):
            config_from_dict(CdnConfig, {"domian": "example.com"})

    def test_unknown_enum_value(self):
        with pytest.raises(ValueError):
            config_from_dict(CdnConfig, {"price_class": "PriceClass_1"})


@pytest.mark.parametrize(
    "value,parsed",
    [
        ('{"domain_name": "example.com"}', {"domain_name": "example.com"}),
        ('["a", "b"]', ["a", "b"]),
        ("example.com", "example.com"),
        (None, None),
    ],
)
def test_parse_args_value(value, parsed):
    assert _parse_args_value(value) == parsed
