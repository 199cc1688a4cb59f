"""KHR_materials_volume: thickness and attenuation of a volumetric material."""

from __future__ import annotations

import math
from typing import ClassVar

from pydantic import NonNegativeFloat, PositiveFloat

from gltfext.extensions.base import RGB, ExtensionModel, TextureInfo, defaulted
from gltfext.registry import ParentKind

EXTENSION_NAME = "KHR_materials_volume"


class MaterialsVolume(ExtensionModel):
    """Volume boundary thickness and the medium's attenuation.

    ``attenuation_distance`` has no JSON default; an absent value stands for
    an infinite distance (no attenuation).
    """

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MATERIAL

    thickness_factor: NonNegativeFloat | None = defaulted(0.0)
    thickness_texture: TextureInfo | None = None
    attenuation_distance: PositiveFloat | None = None
    attenuation_color: RGB | None = defaulted([1.0, 1.0, 1.0])

    def effective_attenuation_distance(self) -> float:
        if self.attenuation_distance is None:
            return math.inf
        return self.attenuation_distance
