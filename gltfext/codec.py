"""Codec primitives shared by every extension type.

Extension payloads carry *defaulted* members: absent in the input means the
extension's default, and a member equal to its default is dropped from the
output so that a default record renders as ``{}``.  The helpers here implement
that discipline:

* :func:`box` / :func:`unbox` move between a plain value and an optional one
  (``None`` is absent, ``0`` is present).
* :func:`render` produces canonical compact JSON (integer-valued floats render
  without a fractional part, so ``1.0`` becomes ``1``).
* :func:`elide` removes one ``"name":value`` literal from a rendered object and
  repairs the separators at the removal site; :func:`sanitize` repairs the
  object boundaries once per encode.
"""

from __future__ import annotations

import json
import math
from typing import Any, TypeVar

from gltfext.config import ENCODING, JSON_SEPARATORS
from gltfext.errors import ExtensionParseError

T = TypeVar("T")

_MISSING: Any = object()


def box(value: T) -> T:
    """Wrap a present value into an optional slot.

    ``None`` is the absent marker and cannot be boxed.
    """
    if value is None:
        raise TypeError("cannot box None; leave the field unset instead")
    return value


def unbox(value: T | None, default: T = _MISSING) -> T:
    """Unwrap an optional value.

    Returns *default* when *value* is absent and a default was given,
    otherwise raises :class:`ValueError`.
    """
    if value is None:
        if default is _MISSING:
            raise ValueError("value is absent")
        return default
    return value


def canonical(value: Any) -> Any:
    """Return *value* with integer-valued finite floats converted to ``int``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return value
    if isinstance(value, dict):
        return {k: canonical(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [canonical(v) for v in value]
    return value


def render(value: Any) -> bytes:
    """Render *value* as compact canonical JSON bytes."""
    return json.dumps(
        canonical(value),
        separators=JSON_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    ).encode(ENCODING)


def render_raw(value: Any) -> bytes:
    """Render an opaque JSON value without canonicalising its numbers."""
    return json.dumps(
        value,
        separators=JSON_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    ).encode(ENCODING)


def default_literal(alias: str, default: Any) -> bytes:
    """Return the ``"alias":default`` literal that :func:`elide` searches for."""
    return render(alias) + b":" + render(default)


def elide(fragment: bytes, literal: bytes) -> bytes:
    """Remove the first occurrence of *literal* from a rendered JSON object.

    The separators left behind at the removal site are repaired:
    ``,,`` collapses to ``,``, ``{,`` to ``{`` and ``,}`` to ``}``.
    At most one replacement is made; a missing literal is a no-op.
    """
    pos = fragment.find(literal)
    if pos < 0:
        return fragment
    head = fragment[:pos]
    tail = fragment[pos + len(literal):]
    if head.endswith(b",") and (tail.startswith(b",") or tail.startswith(b"}")):
        head = head[:-1]
    elif head.endswith(b"{") and tail.startswith(b","):
        tail = tail[1:]
    return head + tail


def sanitize(fragment: bytes) -> bytes:
    """Repair a leading ``{,`` and a trailing ``,}``; idempotent."""
    if fragment.startswith(b"{,"):
        fragment = b"{" + fragment[2:]
    if fragment.endswith(b",}"):
        fragment = fragment[:-2] + b"}"
    return fragment


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not a valid JSON number")


def load_fragment(data: Any, extension: str) -> Any:
    """Parse an extension fragment into a JSON value.

    Parameters
    ----------
    data:
        ``bytes``, ``bytearray`` or ``str`` holding JSON text, or an
        already-parsed ``dict``.
    extension:
        Extension name used in the error message.

    Raises
    ------
    ExtensionParseError
        If the text is not valid JSON (``NaN`` and ``Infinity`` included) or
        does not hold an object.
    """
    if isinstance(data, dict):
        return data
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode(ENCODING)
        except UnicodeDecodeError as exc:
            raise ExtensionParseError(extension, exc) from exc
    if not isinstance(data, str):
        raise ExtensionParseError(
            extension, f"expected JSON text, got {type(data).__name__}"
        )
    try:
        value = json.loads(data, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ExtensionParseError(extension, exc) from exc
    if not isinstance(value, dict):
        raise ExtensionParseError(
            extension, f"expected a JSON object, got {type(value).__name__}"
        )
    return value


def dump_fragment(value: Any, extension: str) -> bytes:
    """Render a parsed JSON object back to text for strict validation.

    Raises :class:`ExtensionParseError` if *value* holds something JSON
    cannot carry (non-finite floats, arbitrary objects).
    """
    try:
        return render_raw(value)
    except (TypeError, ValueError) as exc:
        raise ExtensionParseError(extension, exc) from exc
