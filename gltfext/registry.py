"""ExtensionRegistry: map extension names to the decoders that understand them.

Decoders are keyed by ``(name, parent)`` so one name can carry different
payloads on different owners (``GRIFFEL_bim_data`` on a node versus on the
document root).  A lookup by name alone returns the decoder registered last
under that name, whatever its parent.

A process-wide :data:`default_registry` is populated with every built-in
extension when :mod:`gltfext` is imported.  Callers who want an isolated
registry create their own and pass it to :mod:`gltfext.host`.
"""

from __future__ import annotations

import enum
import logging
import threading
from typing import TYPE_CHECKING, Any, Callable

from gltfext.errors import UnknownExtensionError

if TYPE_CHECKING:
    from gltfext.extensions.base import ExtensionModel

logger = logging.getLogger(__name__)


class ParentKind(str, enum.Enum):
    """glTF objects that own an ``extensions`` map."""

    DOCUMENT = "document"
    SCENE = "scene"
    NODE = "node"
    MESH_PRIMITIVE = "mesh_primitive"
    MATERIAL = "material"
    TEXTURE = "texture"
    BUFFER_VIEW = "buffer_view"


Decoder = Callable[[Any], "ExtensionModel"]


class ExtensionRegistry:
    """Thread-safe mapping from extension name (and parent) to decoder."""

    def __init__(self) -> None:
        self._decoders: dict[tuple[str, ParentKind | None], Decoder] = {}
        self._latest: dict[str, Decoder] = {}
        self._lock = threading.RLock()

    def register(
        self,
        name: str,
        decoder: Decoder,
        parent: ParentKind | None = None,
    ) -> None:
        """Insert or overwrite the decoder for *name* on *parent*.

        ``parent=None`` registers a decoder valid on any owner.  The new
        decoder also becomes the one returned by a name-only lookup.
        """
        key = (name, ParentKind(parent) if parent is not None else None)
        with self._lock:
            if key in self._decoders:
                logger.debug("Overwriting decoder for %s (%s)", name, parent)
            self._decoders[key] = decoder
            self._latest[name] = decoder
        logger.debug("Registered extension: %s (%s)", name, parent or "any")

    def unregister(self, name: str, parent: ParentKind | None = None) -> Decoder | None:
        """Remove one entry and return its decoder, if any."""
        key = (name, ParentKind(parent) if parent is not None else None)
        with self._lock:
            decoder = self._decoders.pop(key, None)
            if decoder is not None and self._latest.get(name) is decoder:
                remaining = [d for (n, _), d in self._decoders.items() if n == name]
                if remaining:
                    self._latest[name] = remaining[-1]
                else:
                    del self._latest[name]
        return decoder

    def lookup(self, name: str, parent: ParentKind | None = None) -> Decoder | None:
        """Return the decoder for *name*, or ``None`` when none is registered.

        With a *parent*, the parent-specific entry wins, then the
        parent-agnostic one.  Without, the last registration for *name*.
        """
        with self._lock:
            if parent is None:
                return self._latest.get(name)
            decoder = self._decoders.get((name, ParentKind(parent)))
            if decoder is None:
                decoder = self._decoders.get((name, None))
            return decoder

    def decode(
        self,
        name: str,
        data: Any,
        parent: ParentKind | None = None,
    ) -> ExtensionModel:
        """Look up the decoder for *name* and run it on *data*.

        Raises :class:`UnknownExtensionError` on a miss.  Errors raised by the
        decoder propagate unchanged.
        """
        decoder = self.lookup(name, parent)
        if decoder is None:
            raise UnknownExtensionError(
                name, ParentKind(parent).value if parent is not None else None
            )
        logger.debug("Decoding %s (%s)", name, parent or "any")
        return decoder(data)

    def auto_discover(self) -> None:
        """Register every built-in extension type."""
        from gltfext.extensions import BUILTIN_EXTENSIONS

        for ext_cls in BUILTIN_EXTENSIONS:
            self.register(ext_cls.extension_name, ext_cls.decode, ext_cls.parent_kind)

    def names(self) -> list[str]:
        """Return the registered extension names, sorted."""
        with self._lock:
            return sorted(self._latest)

    def entries(self) -> list[tuple[str, ParentKind | None]]:
        """Return every ``(name, parent)`` key currently registered."""
        with self._lock:
            return list(self._decoders)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._latest

    def __len__(self) -> int:
        with self._lock:
            return len(self._decoders)


default_registry = ExtensionRegistry()


def register(name: str, decoder: Decoder, parent: ParentKind | None = None) -> None:
    """Register *decoder* on the process-wide registry."""
    default_registry.register(name, decoder, parent)


def lookup(name: str, parent: ParentKind | None = None) -> Decoder | None:
    """Look *name* up on the process-wide registry."""
    return default_registry.lookup(name, parent)


def decode(name: str, data: Any, parent: ParentKind | None = None) -> ExtensionModel:
    """Decode *data* through the process-wide registry."""
    return default_registry.decode(name, data, parent)
