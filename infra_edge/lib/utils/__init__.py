from .kebab_from_snake import kebab_from_snake
from .outputs_from_exports import outputs_from_exports
from .slug_from_domain import slug_from_domain
from .transform import Transform, transform
