"""Node-level instancing extensions.

``EXT_mesh_gpu_instancing`` draws a node's mesh once per element of its
instance attributes (``TRANSLATION``, ``ROTATION``, ``SCALE`` and custom
``_``-prefixed ones).  ``EXT_instance_features`` assigns feature IDs to those
instances, read from an instance attribute or from a property table.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, model_validator

from gltfext.extensions.base import ExtensionModel, GltfProperty, UInt32
from gltfext.extensions.mesh_features import Label
from gltfext.registry import ParentKind

GPU_INSTANCING_EXTENSION_NAME = "EXT_mesh_gpu_instancing"
INSTANCE_FEATURES_EXTENSION_NAME = "EXT_instance_features"

TRANSFORM_ATTRIBUTES = ("TRANSLATION", "ROTATION", "SCALE")


class MeshGpuInstancing(ExtensionModel):
    """Per-instance accessors for drawing a node's mesh many times."""

    extension_name: ClassVar[str] = GPU_INSTANCING_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.NODE

    attributes: dict[str, UInt32]

    def transform_accessors(self) -> dict[str, int]:
        """Return the accessors of the standard transform attributes present."""
        return {k: self.attributes[k] for k in TRANSFORM_ATTRIBUTES if k in self.attributes}

    def custom_attributes(self) -> dict[str, int]:
        """Return application-specific (``_``-prefixed) instance attributes."""
        return {k: v for k, v in self.attributes.items() if k.startswith("_")}


class InstanceFeatureID(GltfProperty):
    """Feature IDs of the instances, by attribute or by property table row."""

    feature_count: int = Field(ge=1, le=0xFFFFFFFF)
    attribute: UInt32 | None = None
    label: Label | None = None
    null_feature_id: UInt32 | None = None
    property_table: UInt32 | None = None

    @model_validator(mode="after")
    def _check_reference(self) -> InstanceFeatureID:
        if (self.attribute is None) == (self.property_table is None):
            raise ValueError("exactly one of attribute or propertyTable must be set")
        return self

    def attribute_name(self) -> str | None:
        """Return the ``_FEATURE_ID_n`` instance attribute name, if any."""
        if self.attribute is None:
            return None
        return f"_FEATURE_ID_{self.attribute}"


class InstanceFeatures(ExtensionModel):
    """Feature ID sets of a node's instances."""

    extension_name: ClassVar[str] = INSTANCE_FEATURES_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.NODE

    feature_ids: list[InstanceFeatureID] = Field(min_length=1)

    def add_feature_id(self, feature_id: InstanceFeatureID) -> int:
        """Append a feature ID set and return its index."""
        self.feature_ids.append(feature_id)
        return len(self.feature_ids) - 1

    def by_label(self, label: str) -> InstanceFeatureID | None:
        for feature_id in self.feature_ids:
            if feature_id.label == label:
                return feature_id
        return None
