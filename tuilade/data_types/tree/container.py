from dataclasses import dataclass, field
from typing import NotRequired, TypedDict

from tuilade.data_types.enums import BorderType, FloatMode, Layout, TreeType


class RawGeometry(TypedDict):
    height: int
    width: int
    x: int
    y: int


class RawNode(TypedDict):
    """
    The subset of an i3/sway container the decoder reads. Everything else the
    window manager reports (rect, deco_rect, window, urgent, ...) is ignored.
    """

    border: str
    floating: str
    marks: list[str]
    percent: float | None
    type: str
    layout: NotRequired[str]
    name: NotRequired[str | None]
    geometry: NotRequired[RawGeometry]
    nodes: NotRequired[list["RawNode"]]
    swallows: NotRequired[list[dict[str, str | int | float]]]
    current_border_width: NotRequired[int]
    focused: NotRequired[bool]


@dataclass(frozen=True)
class Geometry:
    height: int
    width: int
    x: int
    y: int

    def pretty_print(self) -> str:
        return (
            f"Geometry | {{ {{ Width: {self.width} | Height: {self.height} }}"
            f" | {{ X: {self.x} | Y: {self.y} }} }}"
        )


@dataclass(frozen=True)
class Node:
    """One container of the layout tree, immutable once decoded."""

    border: BorderType
    floating: FloatMode
    marks: tuple[str, ...]
    percent: float
    tree_type: TreeType
    layout: Layout | None = None
    geometry: Geometry | None = None
    name: str | None = None
    # some containers report a border width of -1
    current_border_width: int | None = None
    focused: bool = False
    swallows: dict[str, str] = field(default_factory=dict)
    children: tuple["Node", ...] = ()

    def has_focus(self) -> bool:
        return self.focused or any(child.has_focus() for child in self.children)
