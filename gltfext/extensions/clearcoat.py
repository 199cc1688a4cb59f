"""KHR_materials_clearcoat: a clear coating layer on top of the base material."""

from __future__ import annotations

from typing import ClassVar

from gltfext.extensions.base import (
    ExtensionModel,
    NormalTextureInfo,
    TextureInfo,
    UnitFloat,
    defaulted,
)
from gltfext.registry import ParentKind

EXTENSION_NAME = "KHR_materials_clearcoat"


class MaterialsClearcoat(ExtensionModel):
    """Clear coat layer on top of the base material."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MATERIAL

    clearcoat_factor: UnitFloat | None = defaulted(0.0)
    clearcoat_texture: TextureInfo | None = None
    clearcoat_roughness_factor: UnitFloat | None = defaulted(0.0)
    clearcoat_roughness_texture: TextureInfo | None = None
    clearcoat_normal_texture: NormalTextureInfo | None = None
