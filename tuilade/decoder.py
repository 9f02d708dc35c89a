"""
Turns one loosely typed JSON document (as returned by `orjson.loads`) into a
validated `Node` tree. The first problem found aborts the whole document.
"""
from tuilade.data_types.enums import BorderType, FloatMode, Layout, TreeType
from tuilade.data_types.tree.container import Geometry, Node, RawGeometry, RawNode
from tuilade.errors import SchemaError
from tuilade.utilities import (
    JSONDict,
    JSONValue,
    stringify,
    try_dict,
    try_float,
    try_int,
    try_list,
    try_string,
    try_uint,
)

NULL_NAME = "(null)"


def required(obj: JSONDict, key: str) -> JSONValue:
    try:
        return obj[key]
    except KeyError:
        raise SchemaError(f'Missing "{key}" field') from None


def decode_marks(val: JSONValue) -> tuple[str, ...]:
    if not isinstance(val, list):
        raise SchemaError("Invalid JSON value type for marks")
    if not all(isinstance(mark, str) for mark in val):
        raise SchemaError("Marks contain non-strings")
    return tuple(val)  # pyright: ignore


def decode_percent(val: JSONValue) -> float:
    return 0.0 if val is None else try_float(val)


def decode_name(val: JSONValue) -> str:
    # window managers report null names for most split containers
    return val if isinstance(val, str) else NULL_NAME


def decode_geometry(val: JSONValue) -> Geometry:
    obj = try_dict(val)
    fields: dict[str, int] = {}
    for key in ("height", "width", "x", "y"):
        if key not in obj:
            raise SchemaError(f'Missing field "{key}"')
        fields[key] = try_uint(obj[key])
    return Geometry(**fields)


def decode_children(val: JSONValue) -> tuple[Node, ...]:
    nodes = try_list(val)
    if any(not isinstance(item, dict) for item in nodes):
        raise SchemaError("Nodes contains non-objects")

    children = []
    for idx, item in enumerate(nodes):
        try:
            children.append(decode_node(item))
        except SchemaError as e:
            raise e.nested(idx) from None
    return tuple(children)


def decode_swallows(val: JSONValue) -> dict[str, str]:
    if not isinstance(val, list):
        raise SchemaError("swallows is non-array")

    swallows: dict[str, str] = {}
    for entry in val:
        if not isinstance(entry, dict):
            raise SchemaError("non-object in swallows")
        for key, criterion in entry.items():
            if (text := stringify(criterion)) is None:
                raise SchemaError(f'Key "{key}" has non-string or non-number value')
            swallows[key] = text
    return swallows


def decode_focused(val: JSONValue) -> bool:
    return val if isinstance(val, bool) else False


def decode_node(val: JSONValue) -> Node:
    if not isinstance(val, dict):
        raise SchemaError("Incompatible JSON value type")

    border = BorderType.from_json(required(val, "border"))
    floating = FloatMode.from_json(required(val, "floating"))
    marks = decode_marks(required(val, "marks"))
    percent = decode_percent(required(val, "percent"))
    tree_type = TreeType.from_json(required(val, "type"))

    layout = Layout.from_json(val["layout"]) if "layout" in val else None
    name = decode_name(val["name"]) if "name" in val else None
    geometry = decode_geometry(val["geometry"]) if "geometry" in val else None
    children = decode_children(val["nodes"]) if "nodes" in val else ()
    swallows = decode_swallows(val["swallows"]) if "swallows" in val else {}

    current_border_width = None
    if "current_border_width" in val:
        current_border_width = try_int(val["current_border_width"])

    return Node(
        border=border,
        floating=floating,
        marks=marks,
        percent=percent,
        tree_type=tree_type,
        layout=layout,
        geometry=geometry,
        name=name,
        current_border_width=current_border_width,
        focused=decode_focused(val.get("focused")),
        swallows=swallows,
        children=children,
    )


def encode_node(node: Node) -> RawNode:
    """
    Canonical JSON form of a tree, restricted to the fields `decode_node` reads.
    """
    raw: RawNode = {
        "border": node.border.value,
        "floating": node.floating.value,
        "marks": list(node.marks),
        "percent": node.percent,
        "type": node.tree_type.value,
        "focused": node.focused,
    }
    if node.layout is not None:
        raw["layout"] = node.layout.value
    if node.name is not None:
        raw["name"] = node.name
    if (g := node.geometry) is not None:
        raw["geometry"] = RawGeometry(height=g.height, width=g.width, x=g.x, y=g.y)
    if node.current_border_width is not None:
        raw["current_border_width"] = node.current_border_width
    if node.swallows:
        raw["swallows"] = [dict(node.swallows)]
    if node.children:
        raw["nodes"] = [encode_node(child) for child in node.children]
    return raw
