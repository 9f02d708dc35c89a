import io

import orjson
import pytest

from tuilade.data_types.enums import TreeType
from tuilade.errors import DocumentSyntaxError, InputError
from tuilade.run import (
    footer,
    header,
    main,
    read_input,
    render_documents,
    split_documents,
    title,
)
from tuilade.settings import RenderSettings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.delenv("TUILADE_SETTINGS", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))


@pytest.fixture()
def stdin(monkeypatch):
    def _feed(data: bytes) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _feed


def dump(doc: dict) -> str:
    return orjson.dumps(doc, option=orjson.OPT_INDENT_2).decode()


def test_split_documents():
    code = '\n  {"a": 1}\n\n{"b": 2}\n \t\n{"c": 3}\r\n\r\n{"d": 4}  \n'
    assert split_documents(code) == ['{"a": 1}', '{"b": 2}', '{"c": 3}\r', '{"d": 4}']


@pytest.mark.parametrize("code", ["", "  \n\n \t"])
def test_split_documents_empty(code):
    assert split_documents(code) == []


def test_empty_input_renders_nothing():
    assert list(render_documents("", RenderSettings())) == []


def test_documents_get_sequential_ids(minimal_doc):
    code = dump(minimal_doc) + "\n\n" + dump(minimal_doc)
    chunks = list(render_documents(code, RenderSettings(expand_from=TreeType.ROOT)))

    assert chunks[0] == header
    assert chunks[1] == title
    assert chunks[2].startswith("\tnode_0 [")
    assert chunks[3].startswith("\tnode_1 [")
    assert chunks[-1] == footer
    assert len(chunks) == 5


def test_silent_has_no_title(minimal_doc):
    settings = RenderSettings(silent=True)
    chunks = list(render_documents(dump(minimal_doc), settings))
    assert title not in chunks
    assert chunks == [header, "", footer]


def test_syntax_error():
    with pytest.raises(DocumentSyntaxError, match="JSON parse error"):
        list(render_documents("{not json", RenderSettings()))


def test_read_input_rejects_invalid_utf8():
    with pytest.raises(InputError, match="Unicode decoding error"):
        read_input(io.BytesIO(b"\xff\xfe{"))


def test_main_empty_stdin(stdin, capsys):
    stdin(b"")
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_renders_file(tmp_path, minimal_doc, capsys):
    path = tmp_path / "tree.json"
    path.write_text(dump(minimal_doc))

    assert main([str(path), "--expand-from", "root"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("digraph tuilade {\n")
    assert title in out
    assert "\tnode_0 [shape=record" in out
    assert out.endswith("}\n")


def test_main_flags(stdin, sample_tree, capsys):
    stdin(dump(sample_tree).encode())
    assert main(["-s", "-n", "-p", "-e", "floating_con"]) == 0
    out = capsys.readouterr().out
    assert title not in out
    # ancestors drawn along the focus path only
    assert "\tnode_0_0_0_0 [shape=record" in out
    assert "node_0_0_1 " not in out


def test_main_keeps_output_before_broken_document(stdin, minimal_doc, capsys):
    stdin((dump(minimal_doc) + "\n\n{broken").encode())
    assert main(["-e", "root"]) == 1

    captured = capsys.readouterr()
    assert "\tnode_0 [shape=record" in captured.out
    assert not captured.out.endswith("}\n")
    assert captured.err.startswith('error: JSON parse error: "')


def test_main_reports_schema_error_location(stdin, sample_tree, capsys):
    sample_tree["nodes"][0]["nodes"][0]["type"] = "window"
    stdin(dump(sample_tree).encode())
    assert main([]) == 1
    assert capsys.readouterr().err == (
        'error: Unknown tree type "window" (in root.nodes[0].nodes[0])\n'
    )


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.json")]) == 1
    assert capsys.readouterr().err.startswith('error: I/O Error: "')


def test_main_bad_settings(tmp_path, stdin, capsys):
    path = tmp_path / "settings.json"
    path.write_text('{"silent": 1}')
    stdin(b"")
    assert main(["--settings", str(path)]) == 1
    assert '"silent" must be true or false' in capsys.readouterr().err


def test_main_unknown_expand_from(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-e", "window"])
    assert exc.value.code == 2
