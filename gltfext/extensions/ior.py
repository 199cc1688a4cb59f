"""KHR_materials_ior: index of refraction of a material."""

from __future__ import annotations

from typing import ClassVar

from pydantic import NonNegativeFloat

from gltfext.extensions.base import ExtensionModel, defaulted
from gltfext.registry import ParentKind

EXTENSION_NAME = "KHR_materials_ior"

DEFAULT_IOR = 1.5


class MaterialsIOR(ExtensionModel):
    """Index of refraction; ``0`` is a special value for infinite IOR."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MATERIAL

    ior: NonNegativeFloat | None = defaulted(DEFAULT_IOR)
