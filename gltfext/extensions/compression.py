"""Geometry compression extensions.

* ``KHR_draco_mesh_compression`` points a mesh primitive at a Draco
  bitstream and maps each attribute to its Draco attribute id.
* ``EXT_meshopt_compression`` stores a buffer view compressed with
  meshoptimizer; the view itself becomes the decompressed fallback.
* ``KHR_mesh_quantization`` records the bit depth attributes were quantized
  to.

Only the JSON payloads live here.  Decompressing the bitstreams needs the
native codecs and is left to the host.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar

from pydantic import Field

from gltfext.codec import box
from gltfext.extensions.base import ExtensionModel, UInt32, defaulted
from gltfext.registry import ParentKind

DRACO_EXTENSION_NAME = "KHR_draco_mesh_compression"
MESHOPT_EXTENSION_NAME = "EXT_meshopt_compression"
QUANTIZATION_EXTENSION_NAME = "KHR_mesh_quantization"


class DracoMeshCompression(ExtensionModel):
    """Draco bitstream location and attribute id map of one primitive."""

    extension_name: ClassVar[str] = DRACO_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MESH_PRIMITIVE

    buffer_view: UInt32
    attributes: dict[str, UInt32]

    def attribute_id(self, semantic: str) -> int | None:
        """Return the Draco attribute id for *semantic* (``POSITION`` ...)."""
        return self.attributes.get(semantic)


class MeshoptMode(str, Enum):
    ATTRIBUTES = "ATTRIBUTES"
    TRIANGLES = "TRIANGLES"
    INDICES = "INDICES"


class MeshoptFilter(str, Enum):
    NONE = "NONE"
    OCTAHEDRAL = "OCTAHEDRAL"
    QUATERNION = "QUATERNION"
    EXPONENTIAL = "EXPONENTIAL"


class MeshoptCompression(ExtensionModel):
    """Compressed source of a buffer view.

    ``buffer``/``byteOffset``/``byteLength`` locate the compressed bytes;
    ``count`` elements of ``byteStride`` bytes come out of the decoder.
    """

    extension_name: ClassVar[str] = MESHOPT_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.BUFFER_VIEW

    byte_offset: UInt32 | None = defaulted(0)
    filter: MeshoptFilter | None = defaulted(MeshoptFilter.NONE)
    buffer: UInt32
    byte_length: UInt32
    byte_stride: UInt32
    count: UInt32
    mode: MeshoptMode

    def set_filter(self, value: MeshoptFilter | str) -> None:
        self._assign("filter", box(value))

    def get_filter(self) -> MeshoptFilter:
        return self.value_or_default("filter")

    def decoded_length(self) -> int:
        """Size in bytes of the buffer view once decompressed."""
        return self.count * self.byte_stride


QuantizationBits = Annotated[int, Field(ge=0, le=255)]


class MeshQuantization(ExtensionModel):
    """Per-semantic quantization bit depths of a document's attributes."""

    extension_name: ClassVar[str] = QUANTIZATION_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.DOCUMENT

    position: QuantizationBits | None = Field(None, alias="POSITION")
    normal: QuantizationBits | None = Field(None, alias="NORMAL")
    tangent: QuantizationBits | None = Field(None, alias="TANGENT")
    texcoord: QuantizationBits | None = Field(None, alias="TEXCOORD")
    color: QuantizationBits | None = Field(None, alias="COLOR")
    generic: QuantizationBits | None = Field(None, alias="GENERIC")
    joints: QuantizationBits | None = Field(None, alias="JOINTS")
    weights: QuantizationBits | None = Field(None, alias="WEIGHTS")
    component_type: str | None = None

    def bits_for(self, semantic: str) -> int | None:
        """Return the bit depth recorded for an attribute semantic.

        Indexed semantics share one entry, so ``TEXCOORD_1`` reads
        ``TEXCOORD`` and ``COLOR_0`` reads ``COLOR``.
        """
        base = semantic.upper().rstrip("0123456789").rstrip("_")
        for name, info in type(self).model_fields.items():
            if info.alias == base:
                return getattr(self, name)
        return None
