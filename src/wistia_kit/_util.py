from __future__ import annotations

import inspect, functools, re, types
import collections.abc as _abc
import pandas as pd

from typing import Iterable, Any, Sequence, get_origin, get_args, Union, get_type_hints, Mapping

from collections.abc import Sequence as ABCSequence

__all__ = [
    "_raise_invalid_argument",
    "runtime_typecheck",
    "_validate_enum",
    "_prune_none",
    "_stringify_params",
    "to_dataframe",
]

def _raise_invalid_argument(param: str, value: str, allowed: Iterable[str]) -> None:
    allowed_set = sorted(set(allowed))
    bullets = "\n  • " + "\n  • ".join(allowed_set)
    raise ValueError(f"{param}={value!r} is invalid. Allowed values:{bullets}")

def _is_instance(val: Any, anno: Any) -> bool:

    origin = get_origin(anno)

    if origin is ABCSequence and isinstance(val, (str, bytes)):
        return False

    if origin is None:
        return anno is Any or isinstance(val, anno)

    if origin is Union or origin is types.UnionType:
        return any(_is_instance(val, arg) for arg in get_args(anno))

    if origin is Sequence and get_args(anno) == (str,):
        return isinstance(val, Sequence) and all(isinstance(v, str) for v in val)

    return isinstance(val, origin)

def runtime_typecheck(fn):

    sig   = inspect.signature(fn)
    hints = get_type_hints(fn)

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        bound = sig.bind_partial(*args, **kwargs)
        for name, value in bound.arguments.items():
            anno = hints.get(name)
            if anno and not _is_instance(value, anno):
                raise TypeError(
                    f"{fn.__name__}() argument '{name}' "
                    f"expects {anno}, got {type(value).__name__}"
                )
        return fn(*args, **kwargs)

    return wrapper

def _validate_enum(
    param_name: str,
    value: str | Sequence[str],
    allowed: set[str],
    *,
    allow_multi: bool = True,
) -> tuple[str, ...]:
    """Normalise *value* to a tuple and verify every element is in *allowed*."""

    if isinstance(value, str):
        items = [s.strip() for s in value.split(",")] if allow_multi else [value]
    elif isinstance(value, _abc.Iterable):
        items = list(value)
    else:
        raise TypeError(f"{param_name} must be str or Sequence[str]")

    if not items:
        raise ValueError(f"{param_name} cannot be empty")

    if not set(items).issubset(allowed):
        _raise_invalid_argument(param_name, value, allowed)

    if not allow_multi and len(items) != 1:
        _raise_invalid_argument(param_name, value, allowed)

    return tuple(dict.fromkeys(items))

def _prune_none(mapping: Mapping[str, object]) -> dict[str, object]:
    """Return a new dict without the None-valued keys."""
    return {k: v for k, v in mapping.items() if v is not None}

def _stringify_params(mapping: Mapping[str, object]) -> dict[str, str]:
    """Render query values the way the API expects them (``true``/``false`` for bools)."""
    return {
        k: str(v).lower() if isinstance(v, bool) else str(v)
        for k, v in _prune_none(mapping).items()
    }

def to_dataframe(resources: Iterable[Any]) -> pd.DataFrame:
    """Flatten decoded resources (or plain mappings) into a DataFrame.

    Nested objects become dotted columns (``thumbnail.url``); columns whose
    name looks like a timestamp are coerced to UTC datetimes.
    """
    rows = [
        r.model_dump(mode="json") if hasattr(r, "model_dump") else dict(r)
        for r in resources
    ]
    if not rows:
        return pd.DataFrame()

    df = pd.json_normalize(rows, sep=".")

    dt_like = [c for c in df.columns if re.search(r"(_at|date|time)$", c, re.IGNORECASE)]
    for c in dt_like:
        df[c] = pd.to_datetime(df[c], errors="coerce", utc=True)

    return df
