"""KHR_gaussian_splatting: a mesh primitive drawn as 3D Gaussian splats."""

from __future__ import annotations

from typing import ClassVar

from pydantic import model_validator

from gltfext.extensions.base import ExtensionModel, GltfProperty, UInt32
from gltfext.registry import ParentKind

EXTENSION_NAME = "KHR_gaussian_splatting"

REQUIRED_ATTRIBUTES = ("POSITION", "COLOR_0", "_SCALE", "_ROTATION")


class SphericalHarmonics(GltfProperty):
    """View-dependent color coefficients."""

    coefficients: list[float]


class GaussianSplatting(ExtensionModel):
    """Splat attributes of a primitive.

    ``attributes`` must name the position, color, scale and rotation
    accessors of every splat.
    """

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MESH_PRIMITIVE

    attributes: dict[str, UInt32]
    spherical_harmonics: SphericalHarmonics | None = None
    buffer_view: UInt32 | None = None

    @model_validator(mode="after")
    def _check_attributes(self) -> GaussianSplatting:
        for name in REQUIRED_ATTRIBUTES:
            if name not in self.attributes:
                raise ValueError(f"missing required attribute {name}")
        return self
