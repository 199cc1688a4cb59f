"""AGI vendor extensions: AGI_articulations and AGI_stk_metadata.

Both follow the two-owner layout of ``GRIFFEL_bim_data``: the document root
declares named articulations or solar panel groups, and nodes refer to them
by name.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar

from pydantic import Field, model_validator

from gltfext.codec import box
from gltfext.errors import ExtensionValidationError
from gltfext.extensions.base import ExtensionModel, GltfProperty, UnitFloat
from gltfext.registry import ParentKind

ARTICULATIONS_EXTENSION_NAME = "AGI_articulations"
STK_METADATA_EXTENSION_NAME = "AGI_stk_metadata"

# Squared length tolerance of a pointing vector
UNIT_LENGTH_RANGE = (0.999, 1.001)
MAX_POINTING_ROTATIONS = 2

Name = Annotated[str, Field(min_length=1)]
Vector3 = Annotated[list[float], Field(min_length=3, max_length=3)]


class StageType(str, Enum):
    X_TRANSLATE = "xTranslate"
    Y_TRANSLATE = "yTranslate"
    Z_TRANSLATE = "zTranslate"
    X_ROTATE = "xRotate"
    Y_ROTATE = "yRotate"
    Z_ROTATE = "zRotate"
    X_SCALE = "xScale"
    Y_SCALE = "yScale"
    Z_SCALE = "zScale"
    UNIFORM_SCALE = "uniformScale"

    @property
    def is_rotation(self) -> bool:
        return self in (StageType.X_ROTATE, StageType.Y_ROTATE, StageType.Z_ROTATE)


# ---------------------------------------------------------------------------
# AGI_articulations
# ---------------------------------------------------------------------------


class ArticulationStage(GltfProperty):
    """One degree of freedom of an articulation, with its value range."""

    name: Name
    type: StageType
    minimum_value: float = 0.0
    initial_value: float = 0.0
    maximum_value: float = 0.0

    @model_validator(mode="after")
    def _check_range(self) -> ArticulationStage:
        if self.minimum_value > self.initial_value:
            raise ValueError("minimum value must be less than or equal to initial value")
        if self.initial_value > self.maximum_value:
            raise ValueError("initial value must be less than or equal to maximum value")
        return self

    def set_values(self, minimum: float, initial: float, maximum: float) -> None:
        """Replace the value range; *initial* must lie within it."""
        if minimum > initial:
            raise ExtensionValidationError(
                ARTICULATIONS_EXTENSION_NAME,
                "minimumValue",
                "minimum value must be less than or equal to initial value",
            )
        if initial > maximum:
            raise ExtensionValidationError(
                ARTICULATIONS_EXTENSION_NAME,
                "maximumValue",
                "initial value must be less than or equal to maximum value",
            )
        # Widen first so every intermediate state stays ordered.
        self._assign("minimum_value", min(minimum, self.minimum_value))
        self._assign("maximum_value", max(maximum, self.maximum_value))
        self._assign("initial_value", initial)
        self._assign("minimum_value", minimum)
        self._assign("maximum_value", maximum)


class Articulation(GltfProperty):
    """A named set of stages that move one part of a model.

    A ``pointingVector`` turns the articulation into a pointing mechanism
    driven by one or two rotation stages; it must have unit length.
    """

    name: Name
    pointing_vector: Vector3 | None = None
    stages: list[ArticulationStage] | None = None

    @model_validator(mode="after")
    def _check_pointing(self) -> Articulation:
        if self.pointing_vector is not None:
            problem = self._pointing_problem(self.pointing_vector)
            if problem:
                raise ValueError(problem)
        return self

    def _pointing_problem(self, vector: list[float]) -> str | None:
        low, high = UNIT_LENGTH_RANGE
        if not low <= sum(c * c for c in vector) <= high:
            return "pointingVector must be a unit-length vector"
        if self.rotation_stage_count() not in (1, MAX_POINTING_ROTATIONS):
            return "pointingVector requires exactly 1 or exactly 2 rotation stages"
        return None

    def rotation_stage_count(self) -> int:
        return sum(1 for stage in self.stages or [] if stage.type.is_rotation)

    def create_stage(self, name: str, stage_type: StageType | str) -> ArticulationStage:
        """Append a stage with a zero value range and return it."""
        stage = ArticulationStage(name=name, type=stage_type)
        if (
            self.pointing_vector is not None
            and stage.type.is_rotation
            and self.rotation_stage_count() >= MAX_POINTING_ROTATIONS
        ):
            raise ExtensionValidationError(
                ARTICULATIONS_EXTENSION_NAME,
                "stages",
                "cannot add more than 2 rotation stages when a pointingVector is in use",
            )
        if self.stages is None:
            self._assign("stages", [stage])
        else:
            self.stages.append(stage)
        return self.stages[-1]

    def set_pointing_vector(self, vector: list[float] | None) -> None:
        """Set the pointing vector; ``None`` turns pointing off."""
        if vector is None:
            self._assign("pointing_vector", None)
            return
        problem = self._pointing_problem(vector)
        if problem:
            raise ExtensionValidationError(ARTICULATIONS_EXTENSION_NAME, "pointingVector", problem)
        self._assign("pointing_vector", list(vector))


class AgiArticulations(ExtensionModel):
    """Node-level payload: the articulation a node belongs to."""

    extension_name: ClassVar[str] = ARTICULATIONS_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.NODE

    articulation_name: str | None = None
    is_attach_point: bool | None = None

    def get_is_attach_point(self) -> bool:
        return bool(self.is_attach_point)


class AgiArticulationsRoot(ExtensionModel):
    """Document-level payload: every articulation of the model."""

    extension_name: ClassVar[str] = ARTICULATIONS_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.DOCUMENT

    articulations: list[Articulation] | None = None

    def create_articulation(self, name: str) -> Articulation:
        """Append an articulation with no stages and return it."""
        articulation = Articulation(name=name)
        if self.articulations is None:
            self._assign("articulations", [articulation])
        else:
            self.articulations.append(articulation)
        return self.articulations[-1]

    def by_name(self, name: str) -> Articulation | None:
        for articulation in self.articulations or []:
            if articulation.name == name:
                return articulation
        return None


# ---------------------------------------------------------------------------
# AGI_stk_metadata
# ---------------------------------------------------------------------------


class SolarPanelGroup(GltfProperty):
    name: Name
    efficiency: UnitFloat = 0.0

    def set_efficiency(self, efficiency: float) -> None:
        self._assign("efficiency", box(efficiency))


class AgiStkMetadata(ExtensionModel):
    """Node-level payload for STK (Systems Tool Kit) analysis."""

    extension_name: ClassVar[str] = STK_METADATA_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.NODE

    solar_panel_group_name: str | None = None
    no_obscuration: bool | None = None

    def set_no_obscuration(self, value: bool) -> None:
        self._assign("no_obscuration", box(value))

    def get_no_obscuration(self) -> bool:
        """Return ``noObscuration``, False when absent."""
        return bool(self.no_obscuration)


class AgiStkMetadataRoot(ExtensionModel):
    """Document-level payload: the solar panel groups of the model."""

    extension_name: ClassVar[str] = STK_METADATA_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.DOCUMENT

    solar_panel_groups: list[SolarPanelGroup] | None = None

    def create_solar_panel_group(self, name: str) -> SolarPanelGroup:
        """Append a group with zero efficiency and return it."""
        group = SolarPanelGroup(name=name)
        if self.solar_panel_groups is None:
            self._assign("solar_panel_groups", [group])
        else:
            self.solar_panel_groups.append(group)
        return self.solar_panel_groups[-1]
