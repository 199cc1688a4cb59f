"""KHR_materials_iridescence: thin-film interference on a surface."""

from __future__ import annotations

from typing import ClassVar

from pydantic import NonNegativeFloat

from gltfext.extensions.base import ExtensionModel, TextureInfo, UnitFloat, defaulted
from gltfext.registry import ParentKind

EXTENSION_NAME = "KHR_materials_iridescence"


class MaterialsIridescence(ExtensionModel):
    """Thin-film intensity, IOR and thickness range in nanometres.

    The thickness texture's green channel interpolates between
    ``iridescence_thickness_minimum`` and ``iridescence_thickness_maximum``.
    """

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MATERIAL

    iridescence_factor: UnitFloat | None = defaulted(0.0)
    iridescence_texture: TextureInfo | None = None
    iridescence_ior: NonNegativeFloat | None = defaulted(1.3)
    iridescence_thickness_minimum: NonNegativeFloat | None = defaulted(100.0)
    iridescence_thickness_maximum: NonNegativeFloat | None = defaulted(400.0)
    iridescence_thickness_texture: TextureInfo | None = None

    def thickness_range(self) -> tuple[float, float]:
        return (
            self.value_or_default("iridescence_thickness_minimum"),
            self.value_or_default("iridescence_thickness_maximum"),
        )
