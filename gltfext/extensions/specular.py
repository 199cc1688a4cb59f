"""KHR_materials_specular and KHR_materials_pbrSpecularGlossiness."""

from __future__ import annotations

from typing import ClassVar

from pydantic import NonNegativeFloat

from gltfext.extensions.base import (
    RGB,
    RGBA,
    ExtensionModel,
    TextureInfo,
    UnitFloat,
    defaulted,
)
from gltfext.registry import ParentKind

SPECULAR_EXTENSION_NAME = "KHR_materials_specular"
SPECULAR_GLOSSINESS_EXTENSION_NAME = "KHR_materials_pbrSpecularGlossiness"


class MaterialsSpecular(ExtensionModel):
    """Strength and colour of the specular reflection of a dielectric."""

    extension_name: ClassVar[str] = SPECULAR_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MATERIAL

    specular_factor: NonNegativeFloat | None = defaulted(1.0)
    specular_texture: TextureInfo | None = None
    specular_color_factor: RGB | None = defaulted([1.0, 1.0, 1.0])
    specular_color_texture: TextureInfo | None = None


class PBRSpecularGlossiness(ExtensionModel):
    """Specular-glossiness workflow (archived Khronos extension).

    The glossiness is read from the alpha channel of
    ``specular_glossiness_texture``, the specular colour from its RGB.
    """

    extension_name: ClassVar[str] = SPECULAR_GLOSSINESS_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MATERIAL

    diffuse_factor: RGBA | None = defaulted([1.0, 1.0, 1.0, 1.0])
    diffuse_texture: TextureInfo | None = None
    specular_factor: RGB | None = defaulted([1.0, 1.0, 1.0])
    glossiness_factor: UnitFloat | None = defaulted(1.0)
    specular_glossiness_texture: TextureInfo | None = None

    def roughness(self) -> float:
        """Roughness equivalent of the glossiness factor."""
        return 1.0 - self.value_or_default("glossiness_factor")
