"""Resource interface.

A "resource" is a typed entity retrievable by identifier from a named category
endpoint. Concrete resources are frozen dataclasses:

    class UserID(Identifier[int]):
        value_type = int

    @dataclass(frozen=True)
    class User(Resource[UserID], category="user"):
        ID = UserID

        id: UserID
        name: str

`User.category` and `User.ID` are readable from the class alone, without an
instance.

This module does not perform network I/O.
"""

from __future__ import annotations

import dataclasses
import json
import types
from dataclasses import dataclass
from typing import (
    Any,
    ClassVar,
    Generic,
    Mapping,
    TypeVar,
    Union,
    cast,
    get_args,
    get_origin,
    get_type_hints,
)

from ..exceptions import DecodeError
from ..identifier import Identifier

IdT = TypeVar("IdT", bound=Identifier[Any])
R = TypeVar("R", bound="Resource[Any]")

_MISSING = object()


class Resource(Generic[IdT]):
    """Base class for fetchable resources.

    Subclasses pass `category=` as a class keyword and assign `ID` to their
    identifier class. Both are checked when the subclass is created.
    """

    category: ClassVar[str]
    ID: ClassVar[type[Identifier[Any]]]

    id: IdT

    def __init_subclass__(cls, *, category: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if category is not None:
            name = category.strip()
            if not name:
                raise TypeError(f"{cls.__name__}: category must not be empty")
            cls.category = name
        if not isinstance(getattr(cls, "category", None), str):
            raise TypeError(f"{cls.__name__}: missing `category=` class keyword")

        id_type: Any = getattr(cls, "ID", None)
        if not (isinstance(id_type, type) and issubclass(id_type, Identifier)):
            raise TypeError(f"{cls.__name__}: `ID` must be an Identifier subclass")

    # -------------------------------------------------------------------------
    # Decoding
    # -------------------------------------------------------------------------

    @classmethod
    def decode(cls: type[R], data: bytes | str) -> R:
        """Decode a JSON payload into this resource.

        Raises:
            DecodeError: On invalid JSON or a payload that does not match the
                resource's fields.
        """
        try:
            obj: Any = json.loads(data) if data else None
        except (json.JSONDecodeError, UnicodeDecodeError) as err:
            raise DecodeError(
                f"Invalid JSON for {cls.__name__}: {err}", resource_type=cls
            ) from err
        if not isinstance(obj, dict):
            raise DecodeError(
                f"{cls.__name__} payload was not a JSON object", resource_type=cls
            )
        return cls.from_dict(cast(dict[str, Any], obj))

    @classmethod
    def from_dict(cls: type[R], data: Mapping[str, Any]) -> R:
        """Build the resource from a decoded JSON object.

        Unknown keys are ignored. Missing fields fall back to dataclass defaults.
        """
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls.__name__} must be a dataclass")

        hints = get_type_hints(cls)
        kwargs: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if not f.init:
                continue
            raw = data.get(f.name, _MISSING)
            if raw is _MISSING:
                if (
                    f.default is dataclasses.MISSING
                    and f.default_factory is dataclasses.MISSING
                ):
                    raise DecodeError(
                        f"{cls.__name__} payload missing field {f.name!r}",
                        resource_type=cls,
                    )
                continue
            try:
                kwargs[f.name] = _decode_value(hints[f.name], raw)
            except DecodeError as err:
                raise DecodeError(
                    f"{cls.__name__}.{f.name}: {err}", resource_type=cls
                ) from err
        return cls(**kwargs)

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of the resource's fields."""
        return {
            f.name: _encode_value(getattr(self, f.name))
            for f in dataclasses.fields(cast(Any, self))
        }

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict(), separators=(",", ":")).encode()


@dataclass(frozen=True)
class ResourceSpec:
    """Registry entry binding a category name to its resource class."""

    category: str
    model: type[Resource[Any]]

    @classmethod
    def of(cls, model: type[Resource[Any]]) -> "ResourceSpec":
        return cls(category=model.category, model=model)

    def decode(self, data: bytes | str) -> Resource[Any]:
        return self.model.decode(data)


# -----------------------------------------------------------------------------
# Field codecs
# -----------------------------------------------------------------------------


def _decode_value(hint: Any, raw: Any) -> Any:
    if hint is Any:
        return raw

    origin = get_origin(hint)
    if origin in (Union, types.UnionType):
        options = get_args(hint)
        if raw is None and type(None) in options:
            return None
        for option in options:
            if option is type(None):
                continue
            try:
                return _decode_value(option, raw)
            except DecodeError:
                continue
        raise DecodeError(f"value {raw!r} does not match {hint}")

    if origin in (list, tuple):
        if not isinstance(raw, list):
            raise DecodeError(f"expected a list, got {type(raw).__name__}")
        args = get_args(hint)
        item_hint = args[0] if args else Any
        items = [_decode_value(item_hint, item) for item in cast(list[Any], raw)]
        return items if origin is list else tuple(items)

    if origin is dict:
        if not isinstance(raw, dict):
            raise DecodeError(f"expected an object, got {type(raw).__name__}")
        args = get_args(hint)
        value_hint = args[1] if len(args) == 2 else Any
        return {
            str(k): _decode_value(value_hint, v)
            for k, v in cast(dict[str, Any], raw).items()
        }

    if isinstance(hint, type) and issubclass(hint, Identifier):
        return hint.decode(raw)

    if isinstance(hint, type) and issubclass(hint, Resource):
        if not isinstance(raw, dict):
            raise DecodeError(f"expected an object, got {type(raw).__name__}")
        return hint.from_dict(cast(dict[str, Any], raw))

    if hint is float:
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return float(raw)
        raise DecodeError(f"expected float, got {type(raw).__name__}")

    if hint in (str, int, bool):
        if isinstance(raw, bool) and hint is not bool:
            raise DecodeError(f"expected {hint.__name__}, got bool")
        if isinstance(raw, hint):
            return raw
        raise DecodeError(f"expected {hint.__name__}, got {type(raw).__name__}")

    raise DecodeError(f"unsupported field type {hint!r}")


def _encode_value(value: Any) -> Any:
    if isinstance(value, Identifier):
        return value.encode()
    if isinstance(value, Resource):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_encode_value(v) for v in cast(list[Any], value)]
    if isinstance(value, dict):
        return {k: _encode_value(v) for k, v in cast(dict[str, Any], value).items()}
    return value
