"""
JSON encoding and decoding for every geometric value type.

Encodings mirror each record's fields: coordinate tuples become arrays of
numbers, records with named fields become objects with camelCase keys.
Decoding is the exact inverse, so ``decode(type(x), encode(x)) == x``.

Heterogeneous collections use a tagged envelope::

    {"type": "circle2d", "value": {"centerPoint": [0.0, 0.0], "radius": 1.0}}

Malformed input raises ``DecodeError`` describing the mismatch and the
JSON path where it was found.
"""
import json
import logging
import math
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union

from ..bounds.bounding_box import BoundingBox2d, BoundingBox3d
from ..config import DIRECTION_TOLERANCE, JSON_INDENT
from ..core import (
    Axis2d,
    Axis3d,
    Direction2d,
    Direction3d,
    Frame2d,
    Frame3d,
    Plane3d,
    Point2d,
    Point3d,
    Vector2d,
    Vector3d,
)
from ..errors import DecodeError
from ..shapes import (
    Arc2d,
    Arc3d,
    Circle2d,
    Circle3d,
    LineSegment2d,
    LineSegment3d,
    Polygon2d,
    Polyline2d,
    Polyline3d,
    Triangle2d,
    Triangle3d,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Primitive readers
# ---------------------------------------------------------------------------

def _describe(data: Any) -> str:
    text = repr(data)
    return text if len(text) <= 60 else text[:57] + '...'


def _number(data: Any, path: str) -> float:
    # bool is a subclass of int but never a valid coordinate
    if isinstance(data, bool) or not isinstance(data, (int, float)):
        raise DecodeError(f"expected a number, got {_describe(data)}", path)
    return float(data)


def _array(data: Any, path: str, length: Optional[int] = None) -> list:
    if not isinstance(data, list):
        raise DecodeError(f"expected an array, got {_describe(data)}", path)
    if length is not None and len(data) != length:
        raise DecodeError(f"expected an array of {length} elements, got {len(data)}", path)
    return data


def _object(data: Any, path: str) -> dict:
    if not isinstance(data, dict):
        raise DecodeError(f"expected an object, got {_describe(data)}", path)
    return data


def _field(obj: dict, key: str, path: str) -> Tuple[Any, str]:
    if key not in obj:
        raise DecodeError(f"missing field '{key}'", path)
    return obj[key], f"{path}.{key}"


def _components(data: Any, path: str, n: int) -> List[float]:
    items = _array(data, path, n)
    return [_number(item, f"{path}[{i}]") for i, item in enumerate(items)]


# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------

def _decode_vector2d(data: Any, path: str) -> Vector2d:
    return Vector2d(*_components(data, path, 2))


def _decode_vector3d(data: Any, path: str) -> Vector3d:
    return Vector3d(*_components(data, path, 3))


def _decode_point2d(data: Any, path: str) -> Point2d:
    return Point2d(*_components(data, path, 2))


def _decode_point3d(data: Any, path: str) -> Point3d:
    return Point3d(*_components(data, path, 3))


def _check_unit(components: List[float], path: str) -> None:
    magnitude = math.sqrt(sum(c * c for c in components))
    if abs(magnitude - 1.0) > DIRECTION_TOLERANCE:
        raise DecodeError(f"expected a unit direction, got magnitude {magnitude:.6g}", path)


def _decode_direction2d(data: Any, path: str) -> Direction2d:
    components = _components(data, path, 2)
    _check_unit(components, path)
    return Direction2d(*components)


def _decode_direction3d(data: Any, path: str) -> Direction3d:
    components = _components(data, path, 3)
    _check_unit(components, path)
    return Direction3d(*components)


def _decode_axis2d(data: Any, path: str) -> Axis2d:
    obj = _object(data, path)
    return Axis2d(
        _decode_point2d(*_field(obj, 'originPoint', path)),
        _decode_direction2d(*_field(obj, 'direction', path)),
    )


def _decode_axis3d(data: Any, path: str) -> Axis3d:
    obj = _object(data, path)
    return Axis3d(
        _decode_point3d(*_field(obj, 'originPoint', path)),
        _decode_direction3d(*_field(obj, 'direction', path)),
    )


def _decode_plane3d(data: Any, path: str) -> Plane3d:
    obj = _object(data, path)
    return Plane3d(
        _decode_point3d(*_field(obj, 'originPoint', path)),
        _decode_direction3d(*_field(obj, 'normalDirection', path)),
    )


def _decode_frame2d(data: Any, path: str) -> Frame2d:
    obj = _object(data, path)
    return Frame2d(
        _decode_point2d(*_field(obj, 'originPoint', path)),
        _decode_direction2d(*_field(obj, 'xDirection', path)),
        _decode_direction2d(*_field(obj, 'yDirection', path)),
    )


def _decode_frame3d(data: Any, path: str) -> Frame3d:
    obj = _object(data, path)
    return Frame3d(
        _decode_point3d(*_field(obj, 'originPoint', path)),
        _decode_direction3d(*_field(obj, 'xDirection', path)),
        _decode_direction3d(*_field(obj, 'yDirection', path)),
        _decode_direction3d(*_field(obj, 'zDirection', path)),
    )


def _decode_bounding_box2d(data: Any, path: str) -> BoundingBox2d:
    obj = _object(data, path)
    return BoundingBox2d(*[
        _number(*_field(obj, key, path)) for key in ('minX', 'maxX', 'minY', 'maxY')
    ])


def _decode_bounding_box3d(data: Any, path: str) -> BoundingBox3d:
    obj = _object(data, path)
    return BoundingBox3d(*[
        _number(*_field(obj, key, path))
        for key in ('minX', 'maxX', 'minY', 'maxY', 'minZ', 'maxZ')
    ])


def _decode_points(data: Any, path: str, decode_point: Callable, length: Optional[int] = None) -> list:
    items = _array(data, path, length)
    return [decode_point(item, f"{path}[{i}]") for i, item in enumerate(items)]


def _decode_line_segment2d(data: Any, path: str) -> LineSegment2d:
    return LineSegment2d(*_decode_points(data, path, _decode_point2d, 2))


def _decode_line_segment3d(data: Any, path: str) -> LineSegment3d:
    return LineSegment3d(*_decode_points(data, path, _decode_point3d, 2))


def _decode_triangle2d(data: Any, path: str) -> Triangle2d:
    return Triangle2d(*_decode_points(data, path, _decode_point2d, 3))


def _decode_triangle3d(data: Any, path: str) -> Triangle3d:
    return Triangle3d(*_decode_points(data, path, _decode_point3d, 3))


def _decode_polyline2d(data: Any, path: str) -> Polyline2d:
    return Polyline2d(tuple(_decode_points(data, path, _decode_point2d)))


def _decode_polyline3d(data: Any, path: str) -> Polyline3d:
    return Polyline3d(tuple(_decode_points(data, path, _decode_point3d)))


def _decode_polygon2d(data: Any, path: str) -> Polygon2d:
    obj = _object(data, path)
    outer = _decode_points(*_field(obj, 'outerLoop', path), _decode_point2d)
    loops_data, loops_path = _field(obj, 'innerLoops', path)
    loops = [
        tuple(_decode_points(loop, f"{loops_path}[{i}]", _decode_point2d))
        for i, loop in enumerate(_array(loops_data, loops_path))
    ]
    return Polygon2d(tuple(outer), tuple(loops))


def _non_negative(value: float, path: str) -> float:
    if value < 0:
        raise DecodeError(f"expected a non-negative radius, got {value}", path)
    return value


def _decode_circle2d(data: Any, path: str) -> Circle2d:
    obj = _object(data, path)
    radius_data, radius_path = _field(obj, 'radius', path)
    return Circle2d(
        _decode_point2d(*_field(obj, 'centerPoint', path)),
        _non_negative(_number(radius_data, radius_path), radius_path),
    )


def _decode_circle3d(data: Any, path: str) -> Circle3d:
    obj = _object(data, path)
    radius_data, radius_path = _field(obj, 'radius', path)
    return Circle3d(
        _decode_point3d(*_field(obj, 'centerPoint', path)),
        _decode_direction3d(*_field(obj, 'axialDirection', path)),
        _non_negative(_number(radius_data, radius_path), radius_path),
    )


def _decode_arc2d(data: Any, path: str) -> Arc2d:
    obj = _object(data, path)
    return Arc2d(
        _decode_point2d(*_field(obj, 'centerPoint', path)),
        _decode_point2d(*_field(obj, 'startPoint', path)),
        _number(*_field(obj, 'sweptAngle', path)),
    )


def _decode_arc3d(data: Any, path: str) -> Arc3d:
    obj = _object(data, path)
    return Arc3d(
        _decode_axis3d(*_field(obj, 'axis', path)),
        _decode_point3d(*_field(obj, 'startPoint', path)),
        _number(*_field(obj, 'sweptAngle', path)),
    )


# ---------------------------------------------------------------------------
# Encoders
# ---------------------------------------------------------------------------

def _encode_components(value) -> List[float]:
    return [float(c) for c in (value.x, value.y, getattr(value, 'z', None)) if c is not None]


def _encode_axis(axis) -> dict:
    return {
        'originPoint': _encode_components(axis.origin_point),
        'direction': _encode_components(axis.direction),
    }


def _encode_plane3d(plane: Plane3d) -> dict:
    return {
        'originPoint': _encode_components(plane.origin_point),
        'normalDirection': _encode_components(plane.normal_direction),
    }


def _encode_frame2d(frame: Frame2d) -> dict:
    return {
        'originPoint': _encode_components(frame.origin_point),
        'xDirection': _encode_components(frame.x_direction),
        'yDirection': _encode_components(frame.y_direction),
    }


def _encode_frame3d(frame: Frame3d) -> dict:
    return {
        'originPoint': _encode_components(frame.origin_point),
        'xDirection': _encode_components(frame.x_direction),
        'yDirection': _encode_components(frame.y_direction),
        'zDirection': _encode_components(frame.z_direction),
    }


def _encode_bounding_box2d(box: BoundingBox2d) -> dict:
    return {
        'minX': float(box.min_x), 'maxX': float(box.max_x),
        'minY': float(box.min_y), 'maxY': float(box.max_y),
    }


def _encode_bounding_box3d(box: BoundingBox3d) -> dict:
    return {
        'minX': float(box.min_x), 'maxX': float(box.max_x),
        'minY': float(box.min_y), 'maxY': float(box.max_y),
        'minZ': float(box.min_z), 'maxZ': float(box.max_z),
    }


def _encode_segment(segment) -> list:
    return [_encode_components(segment.start_point), _encode_components(segment.end_point)]


def _encode_triangle(triangle) -> list:
    return [_encode_components(p) for p in triangle.vertices()]


def _encode_polyline(polyline) -> list:
    return [_encode_components(p) for p in polyline.vertices]


def _encode_polygon2d(polygon: Polygon2d) -> dict:
    return {
        'outerLoop': [_encode_components(p) for p in polygon.vertices],
        'innerLoops': [[_encode_components(p) for p in loop] for loop in polygon.inner_loops],
    }


def _encode_circle2d(circle: Circle2d) -> dict:
    return {'centerPoint': _encode_components(circle.center_point), 'radius': float(circle.radius)}


def _encode_circle3d(circle: Circle3d) -> dict:
    return {
        'centerPoint': _encode_components(circle.center_point),
        'axialDirection': _encode_components(circle.axial_direction),
        'radius': float(circle.radius),
    }


def _encode_arc2d(arc: Arc2d) -> dict:
    return {
        'centerPoint': _encode_components(arc.center_point),
        'startPoint': _encode_components(arc.start_point),
        'sweptAngle': float(arc.swept_angle),
    }


def _encode_arc3d(arc: Arc3d) -> dict:
    return {
        'axis': _encode_axis(arc.axis),
        'startPoint': _encode_components(arc.start_point),
        'sweptAngle': float(arc.swept_angle),
    }


# type -> (tag, encoder, decoder)
_CODECS: Dict[type, Tuple[str, Callable, Callable]] = {
    Vector2d: ('vector2d', _encode_components, _decode_vector2d),
    Vector3d: ('vector3d', _encode_components, _decode_vector3d),
    Point2d: ('point2d', _encode_components, _decode_point2d),
    Point3d: ('point3d', _encode_components, _decode_point3d),
    Direction2d: ('direction2d', _encode_components, _decode_direction2d),
    Direction3d: ('direction3d', _encode_components, _decode_direction3d),
    Axis2d: ('axis2d', _encode_axis, _decode_axis2d),
    Axis3d: ('axis3d', _encode_axis, _decode_axis3d),
    Plane3d: ('plane3d', _encode_plane3d, _decode_plane3d),
    Frame2d: ('frame2d', _encode_frame2d, _decode_frame2d),
    Frame3d: ('frame3d', _encode_frame3d, _decode_frame3d),
    BoundingBox2d: ('boundingBox2d', _encode_bounding_box2d, _decode_bounding_box2d),
    BoundingBox3d: ('boundingBox3d', _encode_bounding_box3d, _decode_bounding_box3d),
    LineSegment2d: ('lineSegment2d', _encode_segment, _decode_line_segment2d),
    LineSegment3d: ('lineSegment3d', _encode_segment, _decode_line_segment3d),
    Triangle2d: ('triangle2d', _encode_triangle, _decode_triangle2d),
    Triangle3d: ('triangle3d', _encode_triangle, _decode_triangle3d),
    Polyline2d: ('polyline2d', _encode_polyline, _decode_polyline2d),
    Polyline3d: ('polyline3d', _encode_polyline, _decode_polyline3d),
    Polygon2d: ('polygon2d', _encode_polygon2d, _decode_polygon2d),
    Circle2d: ('circle2d', _encode_circle2d, _decode_circle2d),
    Circle3d: ('circle3d', _encode_circle3d, _decode_circle3d),
    Arc2d: ('arc2d', _encode_arc2d, _decode_arc2d),
    Arc3d: ('arc3d', _encode_arc3d, _decode_arc3d),
}

_BY_TAG: Dict[str, type] = {tag: cls for cls, (tag, _, _) in _CODECS.items()}

SUPPORTED_TYPES: Tuple[type, ...] = tuple(_CODECS)


def type_tag(cls: type) -> str:
    """Tag used in the tagged envelope for ``cls``."""
    try:
        return _CODECS[cls][0]
    except KeyError:
        raise TypeError(f"No JSON codec for {cls.__name__}") from None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def encode(value: Any) -> Union[list, dict]:
    """
    Encode a geometric value as JSON-compatible lists, dicts and floats.

    Parameters
    ----------
    value : any supported geometric type
        Value to encode.

    Returns
    -------
    list or dict
        Structure ready for ``json.dumps``.

    Raises
    ------
    TypeError
        If ``value`` is not a supported type.
    """
    try:
        _, encoder, _ = _CODECS[type(value)]
    except KeyError:
        raise TypeError(f"No JSON codec for {type(value).__name__}") from None
    return encoder(value)


def decode(cls: Type, data: Any) -> Any:
    """
    Decode ``data`` (as produced by ``encode``) into an instance of ``cls``.

    Raises
    ------
    DecodeError
        If ``data`` does not match the encoding of ``cls``.
    TypeError
        If ``cls`` is not a supported type.
    """
    try:
        _, _, decoder = _CODECS[cls]
    except KeyError:
        raise TypeError(f"No JSON codec for {cls.__name__}") from None
    return decoder(data, "")


def encode_tagged(value: Any) -> dict:
    """Encode ``value`` inside a ``{"type": ..., "value": ...}`` envelope."""
    return {'type': type_tag(type(value)), 'value': encode(value)}


def decode_tagged(data: Any) -> Any:
    """Decode a tagged envelope produced by ``encode_tagged``."""
    obj = _object(data, "")
    tag, tag_path = _field(obj, 'type', "")
    if not isinstance(tag, str):
        raise DecodeError(f"expected a type name, got {_describe(tag)}", tag_path)
    if tag not in _BY_TAG:
        raise DecodeError(f"unknown type '{tag}'", tag_path)
    value, value_path = _field(obj, 'value', "")
    _, _, decoder = _CODECS[_BY_TAG[tag]]
    return decoder(value, value_path)


def dumps(value: Any, tagged: bool = False, indent: Optional[int] = None) -> str:
    """Serialize a value to a JSON string, optionally in a tagged envelope."""
    data = encode_tagged(value) if tagged else encode(value)
    return json.dumps(data, indent=indent)


def loads(text: str, cls: Optional[Type] = None) -> Any:
    """
    Parse a JSON string into a geometric value.

    Parameters
    ----------
    text : str
        JSON document.
    cls : type, optional
        Expected type. If None the document must be a tagged envelope.

    Raises
    ------
    DecodeError
        If the text is not valid JSON or does not match the expected type.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"malformed JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    if cls is None:
        return decode_tagged(data)
    return decode(cls, data)


def decode_tagged_list(data: Any) -> list:
    """Decode a JSON array of tagged envelopes."""
    items = _array(data, "")
    values = []
    for i, item in enumerate(items):
        try:
            values.append(decode_tagged(item))
        except DecodeError as e:
            raise e.nested(f"[{i}]") from None
    return values


def save_file(path: Union[str, Path], values: list) -> Path:
    """
    Write a list of values to ``path`` as a JSON array of tagged envelopes.

    Returns
    -------
    Path
        The path written.
    """
    p = Path(path)
    logger.info(f"Saving {len(values)} shapes to: {p}")
    data = [encode_tagged(value) for value in values]
    p.write_text(json.dumps(data, indent=JSON_INDENT), encoding="utf-8")
    return p


def load_file(path: Union[str, Path]) -> list:
    """
    Read a JSON array of tagged envelopes from ``path``.

    Raises
    ------
    DecodeError
        If the file is not valid UTF-8 JSON or an element cannot be decoded.
    OSError
        If the file cannot be read.
    """
    p = Path(path)
    logger.info(f"Loading shapes from: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"file is not valid UTF-8: {e.reason} at byte {e.start}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"malformed JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    values = decode_tagged_list(data)
    logger.debug(f"Decoded {len(values)} shapes from {p}")
    return values
