"""CESIUM_primitive_outline: outline edges of a triangle mesh primitive."""

from __future__ import annotations

from typing import ClassVar

from gltfext.codec import box
from gltfext.extensions.base import ExtensionModel, UInt32
from gltfext.registry import ParentKind

EXTENSION_NAME = "CESIUM_primitive_outline"


class PrimitiveOutline(ExtensionModel):
    """Accessor of vertex index pairs, one pair per outlined edge."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MESH_PRIMITIVE

    indices: UInt32 | None = None

    def set_indices(self, accessor: int) -> None:
        self._assign("indices", box(accessor))

    def get_indices(self) -> int | None:
        return self.indices
