"""Tests for the Draco, meshopt and quantization payloads."""

from __future__ import annotations

import pytest

from gltfext.errors import ExtensionParseError, ExtensionValidationError
from gltfext.extensions import DracoMeshCompression, MeshoptCompression, MeshQuantization
from gltfext.extensions.compression import MeshoptFilter, MeshoptMode


# ---------------------------------------------------------------------------
# KHR_draco_mesh_compression
# ---------------------------------------------------------------------------


class TestDracoMeshCompression:
    def test_round_trip(self):
        data = b'{"bufferView":5,"attributes":{"POSITION":0,"NORMAL":1}}'
        value = DracoMeshCompression.decode(data)
        assert value.buffer_view == 5
        assert value.attribute_id("NORMAL") == 1
        assert value.attribute_id("TANGENT") is None
        assert value.encode() == data

    def test_attributes_required(self):
        with pytest.raises(ExtensionValidationError) as info:
            DracoMeshCompression.decode(b'{"bufferView":5}')
        assert info.value.extension == "KHR_draco_mesh_compression"
        assert info.value.field == "attributes"

    def test_negative_attribute_id(self):
        with pytest.raises(ExtensionValidationError) as info:
            DracoMeshCompression.decode(b'{"bufferView":0,"attributes":{"POSITION":-1}}')
        assert info.value.field == "attributes.POSITION"

    def test_string_buffer_view_is_parse_error(self):
        with pytest.raises(ExtensionParseError):
            DracoMeshCompression.decode(b'{"bufferView":"5","attributes":{}}')


# ---------------------------------------------------------------------------
# EXT_meshopt_compression
# ---------------------------------------------------------------------------


class TestMeshoptCompression:
    def test_defaults_elided(self):
        data = b'{"buffer":1,"byteLength":8,"byteStride":4,"count":2,"mode":"INDICES"}'
        value = MeshoptCompression.decode(data)
        assert value.byte_offset == 0
        assert value.get_filter() is MeshoptFilter.NONE
        assert value.mode is MeshoptMode.INDICES
        assert value.encode() == data

    def test_non_default_members_kept(self):
        data = {
            "buffer": 0,
            "byteOffset": 16,
            "byteLength": 120,
            "byteStride": 12,
            "count": 10,
            "mode": "ATTRIBUTES",
            "filter": "OCTAHEDRAL",
        }
        value = MeshoptCompression.from_dict(data)
        assert value.to_dict() == data
        assert value.decoded_length() == 120

    def test_set_filter(self):
        value = MeshoptCompression(
            buffer=0, byte_length=4, byte_stride=4, count=1, mode=MeshoptMode.ATTRIBUTES
        )
        value.set_filter("QUATERNION")
        assert value.get_filter() is MeshoptFilter.QUATERNION
        assert value.to_dict()["filter"] == "QUATERNION"
        value.set_filter(MeshoptFilter.NONE)
        assert "filter" not in value.to_dict()

    def test_unknown_mode_rejected(self):
        data = b'{"buffer":0,"byteLength":4,"byteStride":4,"count":1,"mode":"FAST"}'
        with pytest.raises(ExtensionValidationError) as info:
            MeshoptCompression.decode(data)
        assert info.value.field == "mode"

    def test_unknown_filter_rejected(self):
        with pytest.raises(ExtensionValidationError):
            MeshoptCompression(
                buffer=0, byte_length=4, byte_stride=4, count=1, mode="ATTRIBUTES"
            ).set_filter("ZIGZAG")

    def test_count_required(self):
        with pytest.raises(ExtensionValidationError) as info:
            MeshoptCompression.decode(
                b'{"buffer":0,"byteLength":4,"byteStride":4,"mode":"ATTRIBUTES"}'
            )
        assert info.value.field == "count"


# ---------------------------------------------------------------------------
# KHR_mesh_quantization
# ---------------------------------------------------------------------------


class TestMeshQuantization:
    def test_empty(self):
        assert MeshQuantization.decode(b"{}").encode() == b"{}"

    def test_uppercase_members(self):
        data = b'{"POSITION":14,"TEXCOORD":12,"componentType":"UNSIGNED_SHORT"}'
        value = MeshQuantization.decode(data)
        assert value.position == 14
        assert value.texcoord == 12
        assert value.component_type == "UNSIGNED_SHORT"
        assert value.encode() == data

    @pytest.mark.parametrize(
        "semantic, bits",
        [("POSITION", 14), ("TEXCOORD_1", 12), ("texcoord_0", 12), ("NORMAL", None)],
    )
    def test_bits_for(self, semantic, bits):
        value = MeshQuantization(position=14, texcoord=12)
        assert value.bits_for(semantic) == bits

    def test_bit_depth_range(self):
        with pytest.raises(ExtensionValidationError) as info:
            MeshQuantization.decode(b'{"POSITION":300}')
        assert info.value.field == "POSITION"
