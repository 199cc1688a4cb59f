"""EXT_structural_metadata: typed metadata schema and where its values live.

The document root holds the schema (classes, their properties and enums)
and the storage that instantiates it:

* property tables, one binary column per property (buffer views);
* property textures, values packed into texture channels;
* property attributes, values stored in vertex attributes.

A mesh primitive refers to the textures and attributes that apply to it by
index.  ``offset``, ``scale``, ``min``, ``max``, ``noData`` and ``default``
depend on the property type and are kept as plain JSON values.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar

from pydantic import Field, model_validator

from gltfext.extensions.base import (
    ExtensionModel,
    GltfProperty,
    TextureInfo,
    UInt32,
    defaulted,
)
from gltfext.extensions.mesh_features import default_channels
from gltfext.registry import ParentKind

EXTENSION_NAME = "EXT_structural_metadata"

Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class ElementType(str, Enum):
    SCALAR = "SCALAR"
    VEC2 = "VEC2"
    VEC3 = "VEC3"
    VEC4 = "VEC4"
    MAT2 = "MAT2"
    MAT3 = "MAT3"
    MAT4 = "MAT4"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    ENUM = "ENUM"


class ComponentType(str, Enum):
    INT8 = "INT8"
    UINT8 = "UINT8"
    INT16 = "INT16"
    UINT16 = "UINT16"
    INT32 = "INT32"
    UINT32 = "UINT32"
    INT64 = "INT64"
    UINT64 = "UINT64"
    FLOAT32 = "FLOAT32"
    FLOAT64 = "FLOAT64"


class EnumValueType(str, Enum):
    INT8 = "INT8"
    UINT8 = "UINT8"
    INT16 = "INT16"
    UINT16 = "UINT16"
    INT32 = "INT32"
    UINT32 = "UINT32"
    INT64 = "INT64"
    UINT64 = "UINT64"


class OffsetType(str, Enum):
    UINT8 = "UINT8"
    UINT16 = "UINT16"
    UINT32 = "UINT32"
    UINT64 = "UINT64"


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class ClassProperty(GltfProperty):
    """Type and semantics of one property of a class."""

    array: bool | None = defaulted(False)
    normalized: bool | None = defaulted(False)
    required: bool | None = defaulted(False)

    type: ElementType
    name: str | None = None
    description: str | None = None
    component_type: ComponentType | None = None
    enum_type: str | None = None
    count: UInt32 | None = None
    offset: Any = None
    scale: Any = None
    max: Any = None
    min: Any = None
    no_data: Any = None
    default: Any = None
    semantic: str | None = None


class MetadataClass(GltfProperty):
    name: str | None = None
    description: str | None = None
    properties: dict[str, ClassProperty] | None = None


class EnumValue(GltfProperty):
    name: str
    description: str | None = None
    value: Int32


class MetadataEnum(GltfProperty):
    value_type: EnumValueType | None = defaulted(EnumValueType.UINT16)
    name: str | None = None
    description: str | None = None
    values: list[EnumValue] = Field(min_length=1)

    def name_of(self, value: int) -> str | None:
        """Return the name of the enum member with integer *value*."""
        for member in self.values:
            if member.value == value:
                return member.name
        return None


class Schema(GltfProperty):
    """Classes and enums that property storage refers to by id."""

    id: str = Field(pattern=r"^[a-zA-Z_][a-zA-Z0-9_]*$")
    name: str | None = None
    description: str | None = None
    version: str | None = None
    classes: dict[str, MetadataClass] | None = None
    enums: dict[str, MetadataEnum] | None = None


# ---------------------------------------------------------------------------
# Property storage
# ---------------------------------------------------------------------------


class PropertyTableProperty(GltfProperty):
    """Buffer views holding one column of a property table."""

    array_offset_type: OffsetType | None = defaulted(OffsetType.UINT32)
    string_offset_type: OffsetType | None = defaulted(OffsetType.UINT32)

    values: UInt32
    array_offsets: UInt32 | None = None
    string_offsets: UInt32 | None = None
    offset: Any = None
    scale: Any = None
    max: Any = None
    min: Any = None


class PropertyTable(GltfProperty):
    name: str | None = None
    class_: str = Field(alias="class")
    count: int = Field(ge=1, le=0xFFFFFFFF)
    properties: dict[str, PropertyTableProperty] | None = None


class PropertyTextureProperty(TextureInfo):
    """Texture channels holding the bytes of one property."""

    channels: list[UInt32] = Field(default_factory=default_channels, min_length=1)
    offset: Any = None
    scale: Any = None
    max: Any = None
    min: Any = None


class PropertyTexture(GltfProperty):
    name: str | None = None
    class_: str = Field(alias="class")
    properties: dict[str, PropertyTextureProperty] | None = None


class PropertyAttributeProperty(GltfProperty):
    """Vertex attribute holding one property, e.g. ``_TEMPERATURE``."""

    attribute: str
    offset: Any = None
    scale: Any = None
    max: Any = None
    min: Any = None


class PropertyAttribute(GltfProperty):
    name: str | None = None
    class_: str = Field(alias="class")
    properties: dict[str, PropertyAttributeProperty] | None = None


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


class StructuralMetadata(ExtensionModel):
    """Document-level payload: the schema and every property storage.

    The schema must be embedded, at least one storage must be present and
    every storage must instantiate a class the schema defines.
    """

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.DOCUMENT

    metadata_schema: Schema = Field(alias="schema")
    schema_uri: str | None = None
    property_tables: list[PropertyTable] | None = None
    property_textures: list[PropertyTexture] | None = None
    property_attributes: list[PropertyAttribute] | None = None

    @model_validator(mode="after")
    def _check_storage(self) -> StructuralMetadata:
        storages = [
            ("propertyTables", self.property_tables),
            ("propertyTextures", self.property_textures),
            ("propertyAttributes", self.property_attributes),
        ]
        if not any(items for _, items in storages):
            raise ValueError(
                "at least one of propertyTables, propertyTextures or "
                "propertyAttributes is required"
            )
        classes = self.metadata_schema.classes or {}
        for member, items in storages:
            for i, item in enumerate(items or []):
                if item.class_ not in classes:
                    raise ValueError(f"{member}[{i}] uses undefined class {item.class_!r}")
        return self

    def class_of(
        self,
        storage: PropertyTable | PropertyTexture | PropertyAttribute,
    ) -> MetadataClass:
        """Return the schema class a property storage instantiates."""
        return (self.metadata_schema.classes or {})[storage.class_]

    def table_by_name(self, name: str) -> PropertyTable | None:
        for table in self.property_tables or []:
            if table.name == name:
                return table
        return None


class PrimitiveStructuralMetadata(ExtensionModel):
    """Mesh primitive payload: indices of the storages that apply to it."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.MESH_PRIMITIVE

    property_textures: list[UInt32] | None = None
    property_attributes: list[UInt32] | None = None
