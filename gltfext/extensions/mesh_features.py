"""EXT_mesh_features: feature IDs attached to a mesh primitive.

A feature ID set identifies features either per vertex (an ``_FEATURE_ID_n``
attribute), per texel (a feature ID texture) or implicitly by vertex index
when neither is given.  ``propertyTable`` links the IDs to a table of
``EXT_structural_metadata``.
"""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import Field

from gltfext.extensions.base import ExtensionModel, GltfProperty, TextureInfo, UInt32
from gltfext.registry import ParentKind

EXTENSION_NAME = "EXT_mesh_features"

DEFAULT_CHANNELS: tuple[int, ...] = (0,)
MAX_CHANNEL = 3

Label = Annotated[str, Field(pattern=r"^[a-zA-Z_][a-zA-Z0-9_]*$")]


def default_channels() -> list[int]:
    """Return a fresh copy of the default channel list, ``[0]``."""
    return list(DEFAULT_CHANNELS)


def is_default_channels(channels: list[int] | None) -> bool:
    """Return True if *channels* equals the default ``[0]``."""
    return channels is not None and list(channels) == list(DEFAULT_CHANNELS)


class FeatureIDTexture(TextureInfo):
    """Texture whose channels, read as little-endian bytes, hold feature IDs."""

    channels: list[UInt32] = Field(default_factory=default_channels, min_length=1)

    def has_default_channels(self) -> bool:
        return is_default_channels(self.channels)


class FeatureID(GltfProperty):
    """One set of feature IDs and where they are read from."""

    feature_count: int = Field(ge=1, le=0xFFFFFFFF)
    null_feature_id: UInt32 | None = None
    label: Label | None = None
    attribute: UInt32 | None = None
    texture: FeatureIDTexture | None = None
    property_table: UInt32 | None = None

    @property
    def is_implicit(self) -> bool:
        """True when IDs come from the vertex index (no attribute or texture)."""
        return self.attribute is None and self.texture is None

    def attribute_name(self) -> str | None:
        """Return the ``_FEATURE_ID_n`` vertex attribute name, if any."""
        if self.attribute is None:
            return None
        return f"_FEATURE_ID_{self.attribute}"


class MeshFeatures(ExtensionModel):
    """Feature ID sets of one mesh primitive."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MESH_PRIMITIVE

    feature_ids: list[FeatureID] = Field(min_length=1)

    def add_feature_id(self, feature_id: FeatureID) -> int:
        """Append a feature ID set and return its index."""
        self.feature_ids.append(feature_id)
        return len(self.feature_ids) - 1

    def by_label(self, label: str) -> FeatureID | None:
        for feature_id in self.feature_ids:
            if feature_id.label == label:
                return feature_id
        return None


def validate_feature_id(feature_id: FeatureID) -> list[str]:
    """Run the strict checks that decoding does not enforce.

    Returns a list of problems, empty when *feature_id* passes:

    * exactly one of ``attribute``, ``texture`` or ``propertyTable`` is set;
    * texture channels are within ``0..3``.
    """
    problems: list[str] = []
    references = sum(
        ref is not None
        for ref in (feature_id.attribute, feature_id.texture, feature_id.property_table)
    )
    if references == 0:
        problems.append(
            "at least one reference method (attribute, texture, or propertyTable) must be set"
        )
    elif references > 1:
        problems.append(
            "only one reference method (attribute, texture, or propertyTable) can be set"
        )

    if feature_id.texture is not None:
        for channel in feature_id.texture.channels:
            if channel > MAX_CHANNEL:
                problems.append(f"texture channel {channel} must be between 0 and {MAX_CHANNEL}")

    return problems
