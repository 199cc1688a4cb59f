"""KHR_materials_anisotropy: anisotropic specular reflections."""

from __future__ import annotations

import math
from typing import ClassVar

from gltfext.extensions.base import ExtensionModel, TextureInfo, UnitFloat, defaulted
from gltfext.registry import ParentKind

EXTENSION_NAME = "KHR_materials_anisotropy"


class MaterialsAnisotropy(ExtensionModel):
    """Anisotropy strength, its rotation in radians, and an optional texture.

    The texture's red and green channels encode the direction in tangent
    space, the blue channel modulates the strength.
    """

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MATERIAL

    anisotropy_strength: UnitFloat | None = defaulted(0.0)
    anisotropy_rotation: float | None = defaulted(0.0)
    anisotropy_texture: TextureInfo | None = None

    def direction(self) -> tuple[float, float]:
        """Return the unit anisotropy direction in tangent space."""
        rotation = self.value_or_default("anisotropy_rotation")
        return (math.cos(rotation), math.sin(rotation))
