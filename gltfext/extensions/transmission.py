"""KHR_materials_transmission: optically thin transparent surfaces."""

from __future__ import annotations

from typing import ClassVar

from gltfext.extensions.base import ExtensionModel, TextureInfo, UnitFloat, defaulted
from gltfext.registry import ParentKind

EXTENSION_NAME = "KHR_materials_transmission"


class MaterialsTransmission(ExtensionModel):
    """Fraction of light transmitted through the surface."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MATERIAL

    transmission_factor: UnitFloat | None = defaulted(0.0)
    transmission_texture: TextureInfo | None = None
