from __future__ import annotations

import collections.abc
import functools
import types
from dataclasses import dataclass
from typing import Annotated, Any, Generic, Iterator, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from ._errors import DecodeError, FieldIssue, NoData

__all__ = ["Outcome", "decode"]

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one API call: a value, nothing, or an error.

    Exactly one of the three holds. Absence (``is_absent``) is *not* an error:
    the call succeeded but there was no body to decode. Unpacking gives the
    two-slot pair callers check::

        value, error = outcome
    """

    value: T | None = None
    error: BaseException | None = None
    _present: bool = False

    @classmethod
    def of(cls, value: T) -> Outcome[T]:
        return cls(value=value, _present=True)

    @classmethod
    def absent(cls) -> Outcome[T]:
        return cls()

    @classmethod
    def failed(cls, error: BaseException) -> Outcome[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self._present

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def is_absent(self) -> bool:
        return not self._present and self.error is None

    def unwrap(self) -> T:
        """Return the value; raise the carried error, or :class:`NoData` when absent."""
        if self.error is not None:
            raise self.error
        if not self._present:
            raise NoData()
        return self.value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.error

    def __repr__(self) -> str:
        if self.error is not None:
            return f"Outcome.failed({self.error!r})"
        if not self._present:
            return "Outcome.absent()"
        return f"Outcome.of({self.value!r})"


@functools.lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def _shape_name(shape: Any) -> str:
    if get_origin(shape) is not None:
        return repr(shape)
    return getattr(shape, "__name__", repr(shape))


def _unwrap(tp: Any) -> Any:
    """Strip ``Annotated`` and ``Optional`` down to the type that was expected."""
    origin = get_origin(tp)
    if origin is Annotated:
        return _unwrap(get_args(tp)[0])
    if origin in (Union, types.UnionType):
        members = [a for a in get_args(tp) if a is not type(None)]
        if len(members) == 1:
            return _unwrap(members[0])
    return tp


def _step(tp: Any, part: str | int) -> Any:
    tp = _unwrap(tp)
    origin = get_origin(tp)
    args = get_args(tp)
    if origin is None and isinstance(tp, type) and issubclass(tp, BaseModel):
        for name, field in tp.model_fields.items():
            if part in (name, field.alias):
                return field.annotation
        return None
    if origin in (Union, types.UnionType):
        # pydantic tags each union member it tried
        return next((a for a in args if _type_name(a) == part), None)
    if origin is tuple and args:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return args[part] if isinstance(part, int) and part < len(args) else None
    if origin in (list, set, frozenset, collections.abc.Sequence) and args:
        return args[0]
    if origin is dict and len(args) == 2:
        return args[1]
    return None


def _type_name(tp: Any) -> str:
    if tp is type(None):
        return "None"
    if get_origin(tp) in (Union, types.UnionType):
        return " | ".join(_type_name(a) for a in get_args(tp))
    if get_origin(tp) is Annotated:
        return _type_name(get_args(tp)[0])
    if isinstance(tp, type) and get_origin(tp) is None:
        return tp.__name__
    return repr(tp).replace("typing.", "")


def _expected(shape: Any, err: dict) -> str:
    tp = shape
    for part in err.get("loc", ()):
        tp = _step(tp, part)
        if tp is None:
            break
    if tp is not None:
        return _type_name(_unwrap(tp)) if tp is not shape else _shape_name(shape)
    return str(err.get("ctx", {}).get("expected", err["type"]))


def _issue(err: dict, shape: Any) -> FieldIssue:
    path = ".".join(str(p) for p in err.get("loc", ()))
    actual = "missing" if err["type"] == "missing" else type(err.get("input")).__name__
    return FieldIssue(
        path=path,
        expected=_expected(shape, err),
        actual=actual,
        message=err["msg"],
        code=err["type"],
    )


def decode(raw: bytes | str | None, shape: Any) -> Outcome[Any]:
    """Decode a JSON body into *shape*.

    *shape* is any type Pydantic can validate: a resource model, or a
    container of them such as ``tuple[Media, ...]``. ``None`` (no body at all)
    yields an absent outcome; an empty but present body is a decode error.
    """
    if raw is None:
        return Outcome.absent()
    try:
        value = _adapter(shape).validate_json(raw)
    except ValidationError as exc:
        return Outcome.failed(DecodeError(_shape_name(shape), [_issue(e, shape) for e in exc.errors()]))
    return Outcome.of(value)
