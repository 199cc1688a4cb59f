"""FB_geometry_metadata: vertex/primitive counts and bounds of a scene."""

from __future__ import annotations

from typing import ClassVar

from pydantic import model_validator

from gltfext.codec import box
from gltfext.extensions.base import ExtensionModel, GltfProperty
from gltfext.registry import ParentKind

EXTENSION_NAME = "FB_geometry_metadata"


class SceneBounds(GltfProperty):
    """Axis-aligned bounding box of every vertex in the scene."""

    min: list[float]
    max: list[float]

    @model_validator(mode="after")
    def _check_extent(self) -> SceneBounds:
        if len(self.min) != len(self.max):
            raise ValueError(
                f"min/max length mismatch ({len(self.min)} != {len(self.max)})"
            )
        if len(self.min) != 3:
            raise ValueError(f"min and max must have exactly 3 elements, got {len(self.min)}")
        return self

    @property
    def size(self) -> tuple[float, float, float]:
        return (
            self.max[0] - self.min[0],
            self.max[1] - self.min[1],
            self.max[2] - self.min[2],
        )

    @property
    def center(self) -> tuple[float, float, float]:
        return (
            (self.min[0] + self.max[0]) / 2.0,
            (self.min[1] + self.max[1]) / 2.0,
            (self.min[2] + self.max[2]) / 2.0,
        )


class GeometryMetadata(ExtensionModel):
    """Summary of the geometry a scene references.

    Counts are floats because they can exceed the 32-bit integer range when
    summed over instanced geometry.
    """

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.SCENE

    vertex_count: float | None = None
    primitive_count: float | None = None
    scene_bounds: SceneBounds | None = None

    # -- builder helpers ------------------------------------------------------

    def set_vertex_count(self, count: float) -> None:
        self._assign("vertex_count", box(float(count)))

    def set_primitive_count(self, count: float) -> None:
        self._assign("primitive_count", box(float(count)))

    def set_scene_bounds(self, bounds: SceneBounds) -> None:
        self._assign("scene_bounds", box(bounds))

    def get_vertex_count(self) -> float | None:
        return self.vertex_count

    def get_primitive_count(self) -> float | None:
        return self.primitive_count

    def get_scene_bounds(self) -> SceneBounds | None:
        return self.scene_bounds
