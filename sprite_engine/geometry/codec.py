"""Payload encoding for geometry values.

Boxes encode field-for-field as ``{"min": {"x", "y"}, "max": {"x", "y"}}``.
Decoding keeps the stored corners as-is; it does not re-normalize them.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from sprite_engine.geometry.aabb import Aabb2
from sprite_engine.geometry.aabb_int import Aabb2i
from sprite_engine.geometry.vector import Vec2
from sprite_engine.geometry.vector_int import Vec2i, Vec3i


def vec2_to_payload(value: Vec2) -> dict[str, object]:
    if not (math.isfinite(value.x) and math.isfinite(value.y)):
        raise ValueError("Non-finite vector components cannot be encoded.")
    return {"x": float(value.x), "y": float(value.y)}


def vec2i_to_payload(value: Vec2i) -> dict[str, object]:
    return {"x": int(value.x), "y": int(value.y)}


def vec3i_to_payload(value: Vec3i) -> dict[str, object]:
    return {"x": int(value.x), "y": int(value.y), "z": int(value.z)}


def aabb2_to_payload(box: Aabb2) -> dict[str, object]:
    return {"min": vec2_to_payload(box.min), "max": vec2_to_payload(box.max)}


def aabb2i_to_payload(box: Aabb2i) -> dict[str, object]:
    return {"min": vec2i_to_payload(box.min), "max": vec2i_to_payload(box.max)}


def payload_to_vec2(payload: object) -> Vec2:
    fields = _require_mapping(payload, "vector")
    return Vec2(_float_field(fields, "x"), _float_field(fields, "y"))


def payload_to_vec2i(payload: object) -> Vec2i:
    fields = _require_mapping(payload, "vector")
    return Vec2i(_int_field(fields, "x"), _int_field(fields, "y"))


def payload_to_vec3i(payload: object) -> Vec3i:
    fields = _require_mapping(payload, "vector")
    return Vec3i(_int_field(fields, "x"), _int_field(fields, "y"), _int_field(fields, "z"))


def payload_to_aabb2(payload: object) -> Aabb2:
    fields = _require_mapping(payload, "box")
    return Aabb2(min=payload_to_vec2(fields.get("min")), max=payload_to_vec2(fields.get("max")))


def payload_to_aabb2i(payload: object) -> Aabb2i:
    fields = _require_mapping(payload, "box")
    return Aabb2i(min=payload_to_vec2i(fields.get("min")), max=payload_to_vec2i(fields.get("max")))


def _require_mapping(payload: object, kind: str) -> Mapping[str, object]:
    if not isinstance(payload, Mapping):
        raise ValueError(f"Encoded {kind} must be an object.")
    return payload


def _int_field(fields: Mapping[str, object], name: str) -> int:
    raw = fields.get(name)
    # bool is an int subclass but never a valid coordinate.
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"Component '{name}' must be an integer.")
    return raw


def _float_field(fields: Mapping[str, object], name: str) -> float:
    raw = fields.get(name)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"Component '{name}' must be a number.")
    return float(raw)
