"""Tests for EXT_structural_metadata (document and primitive payloads)."""

from __future__ import annotations

import copy
import json

import pytest

from gltfext.errors import ExtensionParseError, ExtensionValidationError
from gltfext.extensions import PrimitiveStructuralMetadata, StructuralMetadata
from gltfext.extensions.structural_metadata import ElementType, EnumValueType, OffsetType

DATA = {
    "schema": {
        "id": "buildings",
        "classes": {
            "building": {
                "name": "Building",
                "properties": {
                    "height": {"type": "SCALAR", "componentType": "FLOAT32", "required": True},
                    "usage": {"type": "ENUM", "enumType": "usage"},
                    "name": {"type": "STRING"},
                },
            },
            "surface": {
                "properties": {
                    "temperature": {
                        "type": "SCALAR",
                        "componentType": "UINT8",
                        "normalized": True,
                        "offset": -20,
                        "scale": 0.5,
                    },
                },
            },
        },
        "enums": {
            "usage": {
                "valueType": "UINT8",
                "values": [{"name": "Residential", "value": 0}, {"name": "Office", "value": 1}],
            },
        },
    },
    "propertyTables": [
        {
            "name": "buildings",
            "class": "building",
            "count": 3,
            "properties": {
                "height": {"values": 0},
                "usage": {"values": 1},
                "name": {"values": 2, "stringOffsets": 3, "stringOffsetType": "UINT16"},
            },
        }
    ],
    "propertyTextures": [
        {"class": "surface", "properties": {"temperature": {"index": 0, "channels": [1]}}}
    ],
    "propertyAttributes": [
        {"class": "surface", "properties": {"temperature": {"attribute": "_TEMPERATURE"}}}
    ],
}


def _data(**changes):
    data = copy.deepcopy(DATA)
    data.update(changes)
    return data


# ---------------------------------------------------------------------------
# Document payload
# ---------------------------------------------------------------------------


class TestStructuralMetadataCodec:
    def test_round_trip(self):
        value = StructuralMetadata.decode(json.dumps(DATA))
        assert value.metadata_schema.id == "buildings"
        assert value.to_dict() == DATA

    def test_schema_types(self):
        value = StructuralMetadata.from_dict(DATA)
        height = value.metadata_schema.classes["building"].properties["height"]
        assert height.type is ElementType.SCALAR
        assert height.required is True
        assert height.value_or_default("array") is False
        usage = value.metadata_schema.enums["usage"]
        assert usage.value_type is EnumValueType.UINT8
        assert usage.name_of(1) == "Office"
        assert usage.name_of(7) is None

    def test_enum_value_type_default(self):
        data = _data()
        del data["schema"]["enums"]["usage"]["valueType"]
        value = StructuralMetadata.from_dict(data)
        assert value.metadata_schema.enums["usage"].value_or_default("value_type") is EnumValueType.UINT16
        assert "valueType" not in value.to_dict()["schema"]["enums"]["usage"]

    def test_table_lookup(self):
        value = StructuralMetadata.from_dict(DATA)
        table = value.table_by_name("buildings")
        assert table.count == 3
        assert value.class_of(table).name == "Building"
        assert value.table_by_name("trees") is None
        column = table.properties["name"]
        assert column.string_offset_type is OffsetType.UINT16
        assert table.properties["height"].value_or_default("array_offset_type") is OffsetType.UINT32

    def test_texture_and_attribute_storage(self):
        value = StructuralMetadata.from_dict(DATA)
        texture = value.property_textures[0]
        assert texture.properties["temperature"].channels == [1]
        assert value.class_of(texture).properties["temperature"].normalized is True
        attribute = value.property_attributes[0].properties["temperature"]
        assert attribute.attribute == "_TEMPERATURE"

    def test_texture_channels_default_encoded(self):
        data = _data()
        data["propertyTextures"][0]["properties"]["temperature"] = {"index": 2}
        value = StructuralMetadata.from_dict(data)
        assert value.property_textures[0].properties["temperature"].channels == [0]
        encoded = value.to_dict()["propertyTextures"][0]["properties"]["temperature"]
        assert encoded == {"index": 2, "channels": [0]}

    def test_attribute_offset_kept(self):
        data = _data()
        data["propertyAttributes"][0]["properties"]["temperature"]["offset"] = 273.15
        value = StructuralMetadata.from_dict(data)
        assert value.property_attributes[0].properties["temperature"].offset == 273.15
        assert value.to_dict() == data

    def test_table_only(self):
        data = _data()
        del data["propertyTextures"]
        del data["propertyAttributes"]
        assert StructuralMetadata.from_dict(data).to_dict() == data


class TestStructuralMetadataValidation:
    def test_schema_required(self):
        data = _data()
        del data["schema"]
        with pytest.raises(ExtensionValidationError) as info:
            StructuralMetadata.from_dict(data)
        assert info.value.extension == "EXT_structural_metadata"
        assert info.value.field == "schema"

    def test_storage_required(self):
        with pytest.raises(ExtensionValidationError) as info:
            StructuralMetadata.from_dict({"schema": DATA["schema"]})
        assert "at least one of propertyTables" in str(info.value)

    def test_empty_storage_lists_rejected(self):
        data = {"schema": DATA["schema"], "propertyTables": [], "propertyTextures": []}
        with pytest.raises(ExtensionValidationError):
            StructuralMetadata.from_dict(data)

    def test_undefined_table_class(self):
        data = _data()
        data["propertyTables"][0]["class"] = "tree"
        with pytest.raises(ExtensionValidationError) as info:
            StructuralMetadata.from_dict(data)
        assert "propertyTables[0] uses undefined class 'tree'" in str(info.value)

    def test_undefined_attribute_class(self):
        data = _data()
        data["propertyAttributes"][0]["class"] = "road"
        with pytest.raises(ExtensionValidationError) as info:
            StructuralMetadata.from_dict(data)
        assert "propertyAttributes[0] uses undefined class 'road'" in str(info.value)

    def test_unknown_element_type(self):
        data = _data()
        data["schema"]["classes"]["building"]["properties"]["height"]["type"] = "VEC5"
        with pytest.raises(ExtensionValidationError) as info:
            StructuralMetadata.from_dict(data)
        assert info.value.field == "schema.classes.building.properties.height.type"

    def test_schema_id_pattern(self):
        data = _data()
        data["schema"]["id"] = "3d buildings"
        with pytest.raises(ExtensionValidationError) as info:
            StructuralMetadata.from_dict(data)
        assert info.value.field == "schema.id"

    def test_table_count_positive(self):
        data = _data()
        data["propertyTables"][0]["count"] = 0
        with pytest.raises(ExtensionValidationError) as info:
            StructuralMetadata.from_dict(data)
        assert info.value.field == "propertyTables.0.count"

    def test_string_count_is_parse_error(self):
        data = _data()
        data["propertyTables"][0]["count"] = "3"
        with pytest.raises(ExtensionParseError):
            StructuralMetadata.from_dict(data)

    def test_enum_needs_values(self):
        data = _data()
        data["schema"]["enums"]["usage"]["values"] = []
        with pytest.raises(ExtensionValidationError) as info:
            StructuralMetadata.from_dict(data)
        assert info.value.field == "schema.enums.usage.values"


# ---------------------------------------------------------------------------
# Primitive payload
# ---------------------------------------------------------------------------


class TestPrimitiveStructuralMetadata:
    def test_round_trip(self):
        data = b'{"propertyTextures":[0],"propertyAttributes":[0,1]}'
        value = PrimitiveStructuralMetadata.decode(data)
        assert value.property_attributes == [0, 1]
        assert value.encode() == data

    def test_empty(self):
        assert PrimitiveStructuralMetadata.decode(b"{}").encode() == b"{}"

    def test_negative_index(self):
        with pytest.raises(ExtensionValidationError) as info:
            PrimitiveStructuralMetadata.decode(b'{"propertyTextures":[-1]}')
        assert info.value.field == "propertyTextures.0"
