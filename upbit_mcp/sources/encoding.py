"""Canonical form of request parameters.

The same mapping feeds both the transmitted query/body and the query hash
inside the request token, so formatting here must be deterministic.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

import numpy as np
from pydantic import BaseModel

logger = logging.getLogger(__name__)

ParamsLike = Union[BaseModel, Mapping[str, Any], None]


def format_value(value: Any) -> str:
    """Format a scalar the way it is written on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # Shortest round-trip digits, never exponent notation
        return np.format_float_positional(value, trim="-")
    return str(value)


def encode_params(params: ParamsLike) -> Dict[str, str]:
    """Convert a parameter record into wire-name -> string pairs.

    Fields holding their zero value ("", 0, 0.0, False, None) are omitted.
    Pydantic records use their field aliases as wire names.

    Args:
        params: RequestParams (or any pydantic model), a plain mapping, or None

    Returns:
        Mapping of non-empty parameters; empty for None or unsupported input
    """
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        items = params.model_dump(by_alias=True).items()
    elif isinstance(params, Mapping):
        items = params.items()
    else:
        logger.warning(f"Unsupported parameter record {type(params).__name__}, sending none")
        return {}

    encoded = {}
    for key, value in items:
        if value is None or (not value and isinstance(value, (str, int, float, bool))):
            continue
        encoded[str(key)] = format_value(value)
    return encoded


def canonical_query(params: Optional[Mapping[str, str]]) -> str:
    """Join encoded parameters as k1=v1&k2=v2 with keys sorted, values unescaped."""
    if not params:
        return ""
    return "&".join(f"{key}={params[key]}" for key in sorted(params))
