from .cdn import Cdn
from .config import CdnArgs, CdnDomainArgs, CdnTransforms, normalize_domain, unwrap_domain
