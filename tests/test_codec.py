"""Tests for the codec primitives: box/unbox, canonical rendering, elision."""

from __future__ import annotations

import pytest

from gltfext.codec import (
    box,
    canonical,
    default_literal,
    elide,
    dump_fragment,
    load_fragment,
    render,
    render_raw,
    sanitize,
    unbox,
)
from gltfext.errors import ExtensionError, ExtensionParseError


# ---------------------------------------------------------------------------
# box / unbox
# ---------------------------------------------------------------------------


class TestBox:
    def test_zero_is_present(self):
        assert box(0) == 0
        assert box(0.0) == 0.0

    def test_none_cannot_be_boxed(self):
        with pytest.raises(TypeError):
            box(None)

    def test_unbox_present_ignores_default(self):
        assert unbox(0, 1) == 0
        assert unbox(1.4, 1.5) == 1.4

    def test_unbox_absent_uses_default(self):
        assert unbox(None, 1.5) == 1.5

    def test_unbox_absent_without_default_raises(self):
        with pytest.raises(ValueError):
            unbox(None)


# ---------------------------------------------------------------------------
# Canonical rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_integer_valued_float_becomes_int(self):
        assert canonical(1.0) == 1
        assert isinstance(canonical(1.0), int)
        assert isinstance(canonical(0.0), int)

    def test_fractional_float_unchanged(self):
        assert canonical(1.5) == 1.5
        assert isinstance(canonical(1.5), float)

    def test_bool_untouched(self):
        assert canonical(True) is True

    def test_nested(self):
        assert canonical({"a": [1.0, 2.5], "b": (0.0,)}) == {"a": [1, 2.5], "b": [0]}

    def test_non_finite_float_left_alone(self):
        assert canonical(float("inf")) == float("inf")

    def test_render_is_compact(self):
        assert render({"ior": 1.0, "x": [0.0, 0.5]}) == b'{"ior":1,"x":[0,0.5]}'

    def test_render_rejects_nan(self):
        with pytest.raises(ValueError):
            render(float("nan"))

    def test_render_raw_keeps_fractional_zero(self):
        assert render_raw({"n": 2.0}) == b'{"n":2.0}'

    @pytest.mark.parametrize(
        "alias, default, expected",
        [
            ("ior", 1.5, b'"ior":1.5'),
            ("emissiveStrength", 1.0, b'"emissiveStrength":1'),
            ("anisotropyStrength", 0.0, b'"anisotropyStrength":0'),
            ("attenuationColor", [1.0, 1.0, 1.0], b'"attenuationColor":[1,1,1]'),
        ],
    )
    def test_default_literal(self, alias, default, expected):
        assert default_literal(alias, default) == expected


# ---------------------------------------------------------------------------
# elide / sanitize
# ---------------------------------------------------------------------------


class TestElide:
    def test_only_member(self):
        assert elide(b'{"ior":1.5}', b'"ior":1.5') == b"{}"

    def test_first_member(self):
        assert elide(b'{"a":1,"b":2}', b'"a":1') == b'{"b":2}'

    def test_middle_member(self):
        assert elide(b'{"a":1,"b":2,"c":3}', b'"b":2') == b'{"a":1,"c":3}'

    def test_last_member(self):
        assert elide(b'{"a":1,"b":2}', b'"b":2') == b'{"a":1}'

    def test_missing_literal_is_noop(self):
        fragment = b'{"a":1}'
        assert elide(fragment, b'"b":2') == fragment

    def test_single_replacement(self):
        fragment = b'{"a":1,"x":{"a":1}}'
        assert elide(fragment, b'"a":1') == b'{"x":{"a":1}}'

    def test_successive_elisions(self):
        out = b'{"a":0,"b":0,"c":{"index":0}}'
        out = elide(out, b'"a":0')
        out = elide(out, b'"b":0')
        assert out == b'{"c":{"index":0}}'

    def test_commas_inside_strings_untouched(self):
        out = elide(b'{"a":1,"s":"x,,y"}', b'"a":1')
        assert out == b'{"s":"x,,y"}'


class TestSanitize:
    def test_leading_and_trailing(self):
        assert sanitize(b'{,"a":1,}') == b'{"a":1}'

    def test_idempotent(self):
        once = sanitize(b'{,"a":1}')
        assert sanitize(once) == once

    def test_clean_fragment_unchanged(self):
        assert sanitize(b'{"a":1}') == b'{"a":1}'


# ---------------------------------------------------------------------------
# load_fragment
# ---------------------------------------------------------------------------


class TestLoadFragment:
    def test_bytes_and_str(self):
        assert load_fragment(b'{"a":1}', "X") == {"a": 1}
        assert load_fragment('{"a":1}', "X") == {"a": 1}
        assert load_fragment(bytearray(b"{}"), "X") == {}

    def test_dict_passthrough(self):
        data = {"a": 1}
        assert load_fragment(data, "X") is data

    def test_malformed_json(self):
        with pytest.raises(ExtensionParseError) as info:
            load_fragment(b"{not json", "KHR_materials_ior")
        assert str(info.value).startswith("KHR_materials_ior parsing failed: ")
        assert info.value.extension == "KHR_materials_ior"
        assert info.value.__cause__ is not None

    def test_non_object(self):
        with pytest.raises(ExtensionParseError):
            load_fragment(b"[1, 2]", "X")

    def test_wrong_input_type(self):
        with pytest.raises(ExtensionError):
            load_fragment(42, "X")

    @pytest.mark.parametrize(
        "text",
        [b'{"a":NaN}', b'{"a":Infinity}', b'{"a":[1,-Infinity]}'],
    )
    def test_non_finite_constants_rejected(self, text):
        with pytest.raises(ExtensionParseError) as info:
            load_fragment(text, "FB_geometry_metadata")
        assert "is not a valid JSON number" in str(info.value)


class TestDumpFragment:
    def test_keeps_fractional_zero(self):
        assert dump_fragment({"extras": {"n": 2.0}}, "X") == b'{"extras":{"n":2.0}}'

    def test_non_finite_float_is_parse_error(self):
        with pytest.raises(ExtensionParseError) as info:
            dump_fragment({"anisotropyRotation": float("nan")}, "KHR_materials_anisotropy")
        assert info.value.extension == "KHR_materials_anisotropy"

    def test_unserializable_value_is_parse_error(self):
        with pytest.raises(ExtensionParseError):
            dump_fragment({"a": object()}, "X")
