"""
Graphviz rendering of a decoded tree.

Every visible container becomes one `shape=record` node:

    +-------------------------------------------------------+
    | <NAME> Name of the window (truncated)                 |
    +-------------------------------------------------------+
    | Layout / Geometry    | Percent   |   Current Border   |
    |----------------------|           |       Width        |
    | Tree Type | Floating |-----------+--------------------|
    |----------------------+  Swallows |       Marks        |
    | Border Type          |           |                    |
    +----------------------+-----------+--------------------+

Edges leave the layout field (`NODES` port) and enter the child's `NAME` port.
"""
from tuilade.data_types.enums import BorderType
from tuilade.data_types.tree.container import Node
from tuilade.errors import RenderError
from tuilade.settings import RenderSettings

CUT_AT = 50
FOCUS_MARKER = "🔴 "
NO_NAME = "(no name)"

_escapes = str.maketrans(
    {
        "\\": "\\\\",
        '"': '\\"',
        "|": "\\|",
        "^": "\\^",
        "<": "&lt;",
        ">": "&gt;",
    }
)


def display_name(node: Node) -> str:
    name = node.name if node.name is not None else NO_NAME
    if len(name) <= CUT_AT:
        return name
    return name[:CUT_AT].translate(_escapes) + "..."


def layout_or_geometry(node: Node) -> str:
    if node.layout is not None:
        return f"<NODES>Layout:\\n{node.layout}"
    if node.geometry is not None:
        return node.geometry.pretty_print()
    raise RenderError(
        f'Container "{node.name or NO_NAME}" has neither a layout nor a geometry'
    )


def marks_list(node: Node) -> str:
    return "".join(f'- \\"{mark}\\"\\l' for mark in node.marks)


def shows_swallows(node: Node, settings: RenderSettings) -> bool:
    return bool(node.swallows) and not settings.suppress_swallows


def full_label(node: Node, settings: RenderSettings, name: str) -> str:
    if node.current_border_width is None:
        border_width = "N/A"
    else:
        border_width = str(node.current_border_width)

    marks = f"Marks:\\n{marks_list(node)}" if node.marks else "No marks"
    swallows = "<SWALLOWS>Swallows | " if shows_swallows(node, settings) else ""

    return (
        f"{{<NAME>{name}|{{ {{ {{ Tree Type:\\n{node.tree_type}"
        f" | Floating:\\n{node.floating} }}"
        f" | Border Type:\\n{node.border} | {layout_or_geometry(node)} }}"
        f"| {{ {{ Percent:\\n{node.percent * 100:.3f}%"
        f" | Border Width:\\n{border_width} }}"
        f" | {{ {swallows} {marks} }} }} }} }}"
    )


def silent_border(node: Node) -> str:
    width = node.current_border_width
    titled = node.border is BorderType.NORMAL
    if width is None or not (width > 0 or titled):
        return ""

    title = "\\nTitle" if titled else ""
    size = f"\\n{width}{node.border.unit}" if width > 0 else ""
    return f" | Border:{title}{size}"


def silent_label(node: Node, settings: RenderSettings, name: str) -> str:
    match (shows_swallows(node, settings), bool(node.marks)):
        case (True, True):
            extra = f"| {{ <SWALLOWS>Swallows | Marks:\\n{marks_list(node)} }}"
        case (True, False):
            extra = "| { <SWALLOWS>Swallows }"
        case (False, True):
            extra = f"| {{ Marks:\\n{marks_list(node)} }}"
        case _:
            extra = ""

    return (
        f"{{<NAME>{name}|{{ {{ {{ Tree Type:\\n{node.tree_type}"
        f" | Floating:\\n{node.floating} }} | {layout_or_geometry(node)} }}"
        f"| {{ {{ Percent:\\n{node.percent * 100:.3f}% {silent_border(node)} }}"
        f" {extra} }} }} }}"
    )


def swallow_block(node: Node, node_id: str) -> str:
    criteria = "".join(f'- {key}: \\"{val}\\"\\l' for key, val in node.swallows.items())
    return (
        f'\tnode_{node_id}_swallows [shape=record label="{{ <HEAD>Swallows | {criteria} }}"]\n'
        f"\tnode_{node_id}:SWALLOWS -> node_{node_id}_swallows:HEAD\n"
    )


def render_node(
    node: Node,
    node_id: str,
    settings: RenderSettings,
    expanding: bool = False,
) -> str:
    """
    Renders `node` and the children worth showing. Until a container of type
    `settings.expand_from` is reached only the branches holding the focused
    container are followed; from there on everything below is drawn.
    """
    expanding = expanding or node.tree_type == settings.expand_from
    visible = expanding or settings.show_ancestors

    if expanding:
        children = list(node.children)
    else:
        children = [child for child in node.children if child.has_focus()]

    fragment = ""
    if visible:
        name = (FOCUS_MARKER if node.has_focus() else "") + display_name(node)
        if settings.silent:
            label = silent_label(node, settings, name)
        else:
            label = full_label(node, settings, name)
        fragment += f'\tnode_{node_id} [shape=record label="{label}"]\n'

        if shows_swallows(node, settings):
            fragment += swallow_block(node, node_id)

    for pos, child in enumerate(children):
        child_id = f"{node_id}_{pos}"
        fragment += render_node(child, child_id, settings, expanding)
        if visible:
            fragment += f"\tnode_{node_id}:NODES -> node_{child_id}:NAME\n"

    return fragment
