from __future__ import annotations

import math

import pytest

from sprite_engine.diagnostics.json_codec import dumps_text, loads
from sprite_engine.geometry import Aabb2, Aabb2i, Vec2, Vec2i, Vec3i
from sprite_engine.geometry.codec import (
    aabb2_to_payload,
    aabb2i_to_payload,
    payload_to_aabb2,
    payload_to_aabb2i,
    payload_to_vec2,
    payload_to_vec2i,
    payload_to_vec3i,
    vec2_to_payload,
    vec2i_to_payload,
    vec3i_to_payload,
)


def test_aabb2i_payload_is_field_for_field() -> None:
    box = Aabb2i.new(Vec2i(3, 4), Vec2i(1, 2))
    assert aabb2i_to_payload(box) == {"min": {"x": 1, "y": 2}, "max": {"x": 3, "y": 4}}


def test_aabb2i_survives_json_text() -> None:
    box = Aabb2i.new(Vec2i(-5, 0), Vec2i(6, 7))
    restored = payload_to_aabb2i(loads(dumps_text(aabb2i_to_payload(box))))
    assert restored == box


def test_empty_aabb2i_survives_json_text() -> None:
    restored = payload_to_aabb2i(loads(dumps_text(aabb2i_to_payload(Aabb2i.new_empty()))))
    assert restored == Aabb2i.new_empty()
    assert restored.is_empty()


def test_decoding_keeps_inverted_corners() -> None:
    payload = {"min": {"x": 5, "y": 5}, "max": {"x": 1, "y": 1}}
    box = payload_to_aabb2i(payload)
    assert box.min == Vec2i(5, 5)
    assert box.max == Vec2i(1, 1)
    assert box.is_empty()


def test_aabb2_payload_keeps_values() -> None:
    box = Aabb2.new(Vec2(0.25, -1.0), Vec2(2.0, 3.5))
    restored = payload_to_aabb2(loads(dumps_text(aabb2_to_payload(box))))
    assert restored.min == box.min
    assert restored.max == box.max


def test_empty_aabb2_cannot_be_encoded() -> None:
    with pytest.raises(ValueError, match="Non-finite"):
        aabb2_to_payload(Aabb2.new_empty())
    with pytest.raises(ValueError):
        vec2_to_payload(Vec2(math.nan, 0.0))


def test_vector_payloads() -> None:
    assert vec2_to_payload(Vec2(1.0, 2.0)) == {"x": 1.0, "y": 2.0}
    assert vec2i_to_payload(Vec2i(1, 2)) == {"x": 1, "y": 2}
    assert vec3i_to_payload(Vec3i(1, 2, 3)) == {"x": 1, "y": 2, "z": 3}
    assert payload_to_vec2({"x": 1, "y": 2.5}) == Vec2(1.0, 2.5)
    assert payload_to_vec3i({"x": 1, "y": 2, "z": 3}) == Vec3i(1, 2, 3)


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [1, 2],
        {"x": 1},
        {"x": 1.5, "y": 2},
        {"x": True, "y": 2},
        {"x": "1", "y": 2},
    ],
)
def test_payload_to_vec2i_rejects_malformed_payloads(payload: object) -> None:
    with pytest.raises(ValueError):
        payload_to_vec2i(payload)


def test_payload_to_aabb2i_rejects_missing_corner() -> None:
    with pytest.raises(ValueError, match="must be an object"):
        payload_to_aabb2i({"min": {"x": 0, "y": 0}})


def test_payload_to_vec2_rejects_bool() -> None:
    with pytest.raises(ValueError, match="must be a number"):
        payload_to_vec2({"x": False, "y": 0.0})
