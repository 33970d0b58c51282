from .create_alias_records import create_alias_records, ALIAS_RECORD_TYPES
from .get_hosted_zone_id import get_hosted_zone_id
