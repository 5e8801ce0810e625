"""First-value lookup in the raw request parameter bag.

The bag maps a parameter name to the list of string values supplied by the
transport layer (a query string may repeat a key). Only the first value is used.
"""

from typing import Mapping, Sequence

from areacheck.core.errors import ParamNotFound, ParamValueNotProvided

RawParams = Mapping[str, Sequence[str]]


def get_first_param(params: RawParams, name: str) -> str:
    """Return the first value supplied for `name`.

    Raises:
        ParamNotFound: `name` is not a key of `params`.
        ParamValueNotProvided: `name` is present with an empty value list.
    """
    if name not in params:
        raise ParamNotFound(name)

    values = params[name]
    if not values:
        raise ParamValueNotProvided(name)

    return values[0]
