from tuilade.data_types.enums import BorderType, FloatMode, Layout, TreeType
from tuilade.data_types.tree.container import Geometry, Node
from tuilade.decoder import decode_node, encode_node
from tuilade.renderer import render_node
from tuilade.settings import RenderSettings

__all__ = [
    "BorderType",
    "FloatMode",
    "Geometry",
    "Layout",
    "Node",
    "RenderSettings",
    "TreeType",
    "decode_node",
    "encode_node",
    "render_node",
]
