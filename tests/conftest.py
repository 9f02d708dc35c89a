import pytest

from tuilade.data_types.enums import TreeType
from tuilade.settings import RenderSettings


# --- Raw document fixtures ----------------------------------------------------
@pytest.fixture()
def minimal_doc() -> dict:
    """Smallest document the decoder accepts."""
    return {
        "border": "normal",
        "floating": "auto_off",
        "marks": [],
        "percent": None,
        "type": "root",
        "geometry": {"height": 0, "width": 0, "x": 0, "y": 0},
    }


@pytest.fixture()
def make_doc():
    def _mk(
        tree_type: str = "con",
        name: str | None = None,
        *,
        children: list[dict] | None = None,
        focused: bool = False,
        layout: str | None = "splith",
        **extra,
    ) -> dict:
        doc = {
            "border": "pixel",
            "floating": "auto_off",
            "marks": [],
            "percent": 0.5,
            "type": tree_type,
            "focused": focused,
            "current_border_width": 2,
        }
        if layout is not None:
            doc["layout"] = layout
        else:
            doc["geometry"] = {"height": 600, "width": 800, "x": 0, "y": 0}
        if name is not None:
            doc["name"] = name
        if children is not None:
            doc["nodes"] = children
        doc.update(extra)
        return doc

    return _mk


@pytest.fixture()
def sample_tree(make_doc) -> dict:
    """
    root -> output -> (workspace "1" -> [win a, win b (focused)], workspace "2" -> [win c])
    """
    return make_doc(
        "root",
        "root",
        children=[
            make_doc(
                "output",
                "eDP-1",
                layout="output",
                children=[
                    make_doc(
                        "workspace",
                        "1",
                        children=[
                            make_doc("con", "win a", layout=None),
                            make_doc("con", "win b", layout=None, focused=True),
                        ],
                    ),
                    make_doc(
                        "workspace",
                        "2",
                        children=[make_doc("con", "win c", layout=None)],
                    ),
                ],
            )
        ],
    )


# --- Settings fixtures --------------------------------------------------------
@pytest.fixture()
def settings() -> RenderSettings:
    return RenderSettings()


@pytest.fixture()
def expand_all() -> RenderSettings:
    return RenderSettings(expand_from=TreeType.ROOT)
