"""KHR_materials_sheen: back-scattering sheen for cloth-like surfaces."""

from __future__ import annotations

from typing import ClassVar

from gltfext.extensions.base import RGB, ExtensionModel, TextureInfo, UnitFloat, defaulted
from gltfext.registry import ParentKind

EXTENSION_NAME = "KHR_materials_sheen"


class MaterialsSheen(ExtensionModel):
    """Sheen colour (linear RGB) and roughness, each optionally textured."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MATERIAL

    sheen_color_factor: RGB | None = defaulted([0.0, 0.0, 0.0])
    sheen_color_texture: TextureInfo | None = None
    sheen_roughness_factor: UnitFloat | None = defaulted(0.0)
    sheen_roughness_texture: TextureInfo | None = None

    @property
    def enabled(self) -> bool:
        """Sheen is disabled while the colour factor is black."""
        color = self.value_or_default("sheen_color_factor")
        return any(c > 0.0 for c in color)
