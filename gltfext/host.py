"""Bridge between pygltflib documents and the extension registry.

pygltflib keeps every ``extensions`` member as a plain JSON object.  This
module walks the objects that may own extensions, hands each fragment to the
decoder registered for its name and owner, and writes typed values back.

Policy for fragments the registry cannot handle:

* no decoder registered: the raw JSON is kept untouched so saving the
  document is lossless;
* the decoder rejects the fragment: raise in strict mode, otherwise log a
  warning, keep the raw JSON and record the error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from pygltflib import GLTF2

from gltfext.codec import dump_fragment
from gltfext.config import strict_decoding
from gltfext.errors import ExtensionError
from gltfext.extensions.base import ExtensionModel
from gltfext.registry import ExtensionRegistry, ParentKind, default_registry

logger = logging.getLogger(__name__)

SitePath = tuple[int, ...]
SiteKey = tuple[ParentKind, SitePath, str]


@dataclass
class ExtensionSite:
    """One glTF object that can carry an ``extensions`` map.

    ``path`` is ``()`` for the document, ``(i,)`` for the i-th scene, node,
    material, texture or buffer view, and ``(mesh, primitive)`` for a mesh
    primitive.
    """

    parent: ParentKind
    path: SitePath
    owner: Any


@dataclass
class DecodedExtensions:
    """Typed extension values of one document, keyed by owner and name."""

    values: dict[SiteKey, ExtensionModel] = field(default_factory=dict)
    raw: dict[SiteKey, Any] = field(default_factory=dict)
    errors: dict[SiteKey, ExtensionError] = field(default_factory=dict)

    def get(
        self,
        parent: ParentKind,
        index: int | SitePath,
        name: str,
    ) -> ExtensionModel | None:
        return self.values.get((ParentKind(parent), _as_path(index), name))

    def set(self, index: int | SitePath, value: ExtensionModel) -> None:
        """Attach *value* to the owner at *index* of its extension's parent kind."""
        key = (value.parent_kind, _as_path(index), value.extension_name)
        self.values[key] = value
        self.raw.pop(key, None)
        self.errors.pop(key, None)

    def for_parent(self, parent: ParentKind) -> dict[SiteKey, ExtensionModel]:
        parent = ParentKind(parent)
        return {k: v for k, v in self.values.items() if k[0] is parent}

    def __len__(self) -> int:
        return len(self.values)


def _as_path(index: int | SitePath) -> SitePath:
    if isinstance(index, int):
        return (index,)
    return tuple(index)


def iter_extension_sites(gltf: GLTF2) -> Iterator[ExtensionSite]:
    """Yield every extension owner of *gltf*, document first."""
    yield ExtensionSite(ParentKind.DOCUMENT, (), gltf)
    for i, scene in enumerate(gltf.scenes or []):
        yield ExtensionSite(ParentKind.SCENE, (i,), scene)
    for i, node in enumerate(gltf.nodes or []):
        yield ExtensionSite(ParentKind.NODE, (i,), node)
    for m, mesh in enumerate(gltf.meshes or []):
        for p, primitive in enumerate(mesh.primitives or []):
            yield ExtensionSite(ParentKind.MESH_PRIMITIVE, (m, p), primitive)
    for i, material in enumerate(gltf.materials or []):
        yield ExtensionSite(ParentKind.MATERIAL, (i,), material)
    for i, texture in enumerate(gltf.textures or []):
        yield ExtensionSite(ParentKind.TEXTURE, (i,), texture)
    for i, view in enumerate(gltf.bufferViews or []):
        yield ExtensionSite(ParentKind.BUFFER_VIEW, (i,), view)


def decode_extensions(
    gltf: GLTF2,
    registry: ExtensionRegistry | None = None,
    strict: bool | None = None,
) -> DecodedExtensions:
    """Decode every extension of *gltf* that *registry* knows about.

    Parameters
    ----------
    gltf:
        The document; it is not modified.
    registry:
        Registry to dispatch through, the process-wide one by default.
    strict:
        Raise on the first rejected fragment instead of keeping it raw.
        Defaults to :func:`gltfext.config.strict_decoding`.
    """
    if registry is None:
        registry = default_registry
    if strict is None:
        strict = strict_decoding()

    result = DecodedExtensions()
    for site in iter_extension_sites(gltf):
        for name, fragment in (site.owner.extensions or {}).items():
            key = (site.parent, site.path, name)
            if isinstance(fragment, ExtensionModel):
                result.values[key] = fragment
                continue
            decoder = registry.lookup(name, site.parent)
            if decoder is None:
                logger.debug(
                    "No decoder for %s on %s %s; keeping raw JSON",
                    name,
                    site.parent.value,
                    site.path,
                )
                result.raw[key] = fragment
                continue
            try:
                result.values[key] = decoder(dump_fragment(fragment, name))
            except ExtensionError as exc:
                if strict:
                    raise
                logger.warning(
                    "%s (on %s %s); keeping raw JSON", exc, site.parent.value, site.path
                )
                result.raw[key] = fragment
                result.errors[key] = exc

    logger.info(
        "Decoded %d extension(s), kept %d raw, %d failed",
        len(result.values),
        len(result.raw),
        len(result.errors),
    )
    return result


def encode_extensions(gltf: GLTF2, decoded: DecodedExtensions) -> int:
    """Write the typed values of *decoded* back into *gltf*.

    Each value replaces the JSON object under its name in the owner's
    ``extensions`` map, and the name is added to ``extensionsUsed``.
    Returns the number of values written.

    Raises
    ------
    LookupError
        If a value is keyed to an owner *gltf* does not have.
    """
    owners = {(s.parent, s.path): s.owner for s in iter_extension_sites(gltf)}
    if gltf.extensionsUsed is None:
        gltf.extensionsUsed = []

    written = 0
    for (parent, path, name), value in decoded.values.items():
        owner = owners.get((parent, path))
        if owner is None:
            raise LookupError(f"{name}: document has no {parent.value} at {path}")
        if owner.extensions is None:
            owner.extensions = {}
        owner.extensions[name] = value.to_dict()
        if name not in gltf.extensionsUsed:
            gltf.extensionsUsed.append(name)
        written += 1

    logger.debug("Encoded %d extension(s)", written)
    return written
