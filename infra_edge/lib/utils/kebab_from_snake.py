def kebab_from_snake(v: str) -> str:
    """Module directories are snake case, module names kebab case (``https_redirect`` -> ``https-redirect``)"""
    return v.replace("_", "-")
