from typing import Callable, Optional, Union

Transform = Union[Callable[[dict], Optional[dict]], dict]
"""Either a callable receiving the resource arguments, or a dict of arguments to merge over the defaults"""


def transform(hook: Optional[Transform], args: dict) -> dict:
    """Apply a caller supplied transform to a set of resource arguments

    A callable may mutate ``args`` in place and return ``None``, or return the arguments to use instead.
    A dict is merged over ``args``, its keys win.

    :param hook: The transform, or None
    :param args: Default keyword arguments of the resource
    :return: The final keyword arguments
    """
    if hook is None:
        return args

    if callable(hook):
        result = hook(args)
        return args if result is None else result

    return {**args, **hook}
