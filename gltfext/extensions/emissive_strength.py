"""KHR_materials_emissive_strength: scale the emissive factor beyond 1.0."""

from __future__ import annotations

from typing import ClassVar

from pydantic import NonNegativeFloat

from gltfext.extensions.base import ExtensionModel, defaulted
from gltfext.registry import ParentKind

EXTENSION_NAME = "KHR_materials_emissive_strength"


class MaterialsEmissiveStrength(ExtensionModel):
    """Multiplier applied to the material's emissive color."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MATERIAL

    emissive_strength: NonNegativeFloat | None = defaulted(1.0)
