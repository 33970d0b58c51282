from enum import Enum


class OriginProtocolPolicy(Enum):
    http_only = "http-only"
    https_only = "https-only"
    match_viewer = "match-viewer"


class PriceClass(Enum):
    all = "PriceClass_All"
    price_class_200 = "PriceClass_200"
    price_class_100 = "PriceClass_100"
