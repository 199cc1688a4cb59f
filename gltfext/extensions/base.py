"""Shared value model for extension payloads.

:class:`JsonModel` implements the defaulted codec on top of pydantic:

* ``decode`` starts from the declared defaults and overlays the JSON members;
* ``encode`` renders every present member (defaulted members first), then
  elides each defaulted member that still equals its default.

:class:`GltfProperty` adds the ``extensions`` / ``extras`` passthrough every
glTF property carries, and :class:`ExtensionModel` ties a payload to the
extension name and owner it is registered under.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from gltfext.codec import (
    default_literal,
    dump_fragment,
    elide,
    load_fragment,
    render,
    render_raw,
    sanitize,
    unbox,
)
from gltfext.errors import ExtensionError, ExtensionParseError, ExtensionValidationError
from gltfext.registry import ParentKind

UInt32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]
"""Unsigned 32-bit index (accessor, texture, image, node ...)."""

UnitFloat = Annotated[float, Field(ge=0.0, le=1.0)]
"""Float in the closed range ``[0, 1]``."""

RGB = Annotated[list[UnitFloat], Field(min_length=3, max_length=3)]
RGBA = Annotated[list[UnitFloat], Field(min_length=4, max_length=4)]

_DEFAULTED_KEY = "x-defaulted"
_PASSTHROUGH = ("extensions", "extras")
_PARSE_ERROR_TYPES = {"int_from_float", "json_invalid", "json_type", "model_type"}


def defaulted(default: Any, **constraints: Any) -> Any:
    """Declare a field that is filled on decode and elided on encode.

    List defaults are copied per instance.
    """
    extra = {_DEFAULTED_KEY: True}
    if isinstance(default, (list, tuple)):
        items = list(default)
        return Field(
            default_factory=lambda: list(items),
            json_schema_extra=extra,
            **constraints,
        )
    return Field(default, json_schema_extra=extra, **constraints)


def _is_defaulted(info: Any) -> bool:
    extra = info.json_schema_extra
    return isinstance(extra, dict) and bool(extra.get(_DEFAULTED_KEY))


def _is_parse_error(error_type: str) -> bool:
    return (
        error_type.endswith("_type")
        or error_type.endswith("_parsing")
        or error_type in _PARSE_ERROR_TYPES
    )


def _translate(name: str, exc: ValidationError) -> ExtensionError:
    """Turn a pydantic error into a parse or validation error for *name*."""
    errors = exc.errors()
    for err in errors:
        if _is_parse_error(err["type"]):
            loc = ".".join(str(p) for p in err["loc"])
            return ExtensionParseError(name, f"{loc}: {err['msg']}" if loc else err["msg"])

    err = errors[0]
    field = ".".join(str(p) for p in err["loc"])
    cause = (err.get("ctx") or {}).get("error")
    reason = str(cause) if isinstance(cause, Exception) else err["msg"]
    return ExtensionValidationError(name, field, reason)


class JsonModel(BaseModel):
    """Pydantic model with the defaulted JSON codec."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    # -- decoding -------------------------------------------------------------

    @classmethod
    def error_name(cls) -> str:
        """Name used in error messages raised while decoding this type."""
        return cls.__name__

    @classmethod
    def decode(cls, data: Any) -> Any:
        """Decode a JSON fragment (``bytes``, ``str`` or ``dict``).

        Raises
        ------
        ExtensionParseError
            Malformed JSON or a member of the wrong type.
        ExtensionValidationError
            A missing required member or a violated constraint.
        """
        payload = load_fragment(data, cls.error_name())
        return cls.from_dict(payload)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any:
        """Validate an already-parsed JSON object.

        Members are checked against their JSON types without coercion, so
        ``"1.4"`` is not a number and ``true`` is not an index.
        """
        text = dump_fragment(data, cls.error_name())
        try:
            return cls.model_validate_json(text, strict=True)
        except ValidationError as exc:
            raise _translate(cls.error_name(), exc) from exc

    @classmethod
    def defaulted_fields(cls) -> dict[str, Any]:
        """Return ``{field_name: default}`` for every defaulted field."""
        return {
            name: info.get_default(call_default_factory=True)
            for name, info in cls.model_fields.items()
            if _is_defaulted(info)
        }

    # -- encoding -------------------------------------------------------------

    def encode(self) -> bytes:
        """Render this value as a compact JSON object.

        Absent members are omitted; defaulted members equal to their default
        are elided.
        """
        fields = type(self).model_fields
        first: list[tuple[str, bytes]] = []
        rest: list[tuple[str, bytes]] = []
        last: list[tuple[str, bytes]] = []
        elisions: list[bytes] = []

        for name, info in fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            alias = info.alias or name
            if name in _PASSTHROUGH:
                last.append((alias, render_raw(value)))
            elif _is_defaulted(info):
                first.append((alias, _render_value(value)))
                default = info.get_default(call_default_factory=True)
                if value == default:
                    elisions.append(default_literal(alias, default))
            else:
                rest.append((alias, _render_value(value)))

        members = [render(alias) + b":" + text for alias, text in first + rest + last]
        out = b"{" + b",".join(members) + b"}"
        for literal in elisions:
            out = elide(out, literal)
        return sanitize(out)

    def to_dict(self) -> dict[str, Any]:
        """Return the encoded form as a JSON-compatible ``dict``."""
        return json.loads(self.encode())

    # -- accessors ------------------------------------------------------------

    def is_default(self, field: str) -> bool:
        """Return True if defaulted *field* currently equals its default."""
        defaults = self.defaulted_fields()
        if field not in defaults:
            raise KeyError(f"{field} is not a defaulted field of {type(self).__name__}")
        return getattr(self, field) == defaults[field]

    def value_or_default(self, field: str) -> Any:
        """Return *field*, or its declared default when it is unset."""
        info = type(self).model_fields[field]
        return unbox(getattr(self, field), info.get_default(call_default_factory=True))

    def _assign(self, field: str, value: Any) -> None:
        """Validated assignment that reports failures as extension errors."""
        try:
            setattr(self, field, value)
        except ValidationError as exc:
            raise _translate(self.error_name(), exc) from exc


def _render_value(value: Any) -> bytes:
    if isinstance(value, JsonModel):
        return value.encode()
    if isinstance(value, list) and any(isinstance(v, JsonModel) for v in value):
        return b"[" + b",".join(_render_value(v) for v in value) + b"]"
    if isinstance(value, dict) and any(isinstance(v, JsonModel) for v in value.values()):
        members = [render(k) + b":" + _render_value(v) for k, v in value.items()]
        return b"{" + b",".join(members) + b"}"
    return render(value)


class GltfProperty(JsonModel):
    """JSON object carrying the glTF ``extensions`` and ``extras`` members."""

    extensions: dict[str, Any] | None = None
    extras: Any = None


class ExtensionModel(GltfProperty):
    """Payload of one named extension attached to a glTF object."""

    extension_name: ClassVar[str]
    parent_kind: ClassVar[ParentKind]

    @classmethod
    def error_name(cls) -> str:
        return cls.extension_name


class TextureInfo(GltfProperty):
    """Reference to a texture and the texture coordinate set it samples."""

    index: UInt32
    tex_coord: UInt32 | None = None


class NormalTextureInfo(TextureInfo):
    """Normal map reference with a scalar applied to the sampled normals."""

    scale: float | None = defaulted(1.0)
