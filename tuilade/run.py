import argparse
import logging
import re
import sys
from typing import BinaryIO, Iterator

import orjson

from tuilade.data_types.enums import TreeType
from tuilade.decoder import decode_node
from tuilade.errors import DocumentSyntaxError, InputError, SchemaError, TuiladeError
from tuilade.renderer import render_node
from tuilade.settings import RenderSettings, load_settings

logger = logging.getLogger(__name__)

header = "digraph tuilade {\n"
title = '\tnode_title[shape=rectangle label = "Tuilade i3 viewer"]\n'
footer = "}\n"

_blank_line = re.compile(r"\n[ \t\r]*\n")


def read_input(stream: BinaryIO) -> str:
    try:
        buffer = stream.read()
    except OSError as e:
        raise InputError(f'I/O Error: "{e}"') from e
    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputError(f'Unicode decoding error: "{e}"') from e


def split_documents(code: str) -> list[str]:
    """One JSON document per blank-line separated block"""
    if not (code := code.strip()):
        return []
    return _blank_line.split(code)


def render_documents(code: str, settings: RenderSettings) -> Iterator[str]:
    """
    Yields the diagram piece by piece, so that everything rendered before a
    broken document can still be written out.
    """
    documents = split_documents(code)
    if not documents:
        return

    logger.debug("Rendering %d document(s)", len(documents))
    yield header
    if not settings.silent:
        yield title

    for root_id, window in enumerate(documents):
        try:
            value = orjson.loads(window)
        except orjson.JSONDecodeError as e:
            raise DocumentSyntaxError(f'JSON parse error: "{e}"') from e

        tree = decode_node(value)
        logger.debug("Decoded document %d (%s)", root_id, tree.tree_type)
        yield render_node(tree, str(root_id), settings)

    yield footer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tuilade",
        description="Draw an i3/sway layout tree (get_tree JSON) as a Graphviz digraph",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="file holding the tree dump(s), defaults to standard input",
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        default=None,
        help="hide empty sections as far as possible",
    )
    parser.add_argument(
        "-n",
        "--no-swallows",
        dest="suppress_swallows",
        action="store_true",
        default=None,
        help="never draw swallow criteria",
    )
    parser.add_argument(
        "-e",
        "--expand-from",
        type=TreeType,
        choices=list(TreeType),
        metavar="{" + ",".join(t.value for t in TreeType) + "}",
        help="container type from which the whole subtree is drawn",
    )
    parser.add_argument(
        "-p",
        "--print-parents",
        dest="show_ancestors",
        action="store_true",
        default=None,
        help="also draw the containers above the expansion point",
    )
    parser.add_argument("--settings", help="path to a settings.json file")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def describe(error: TuiladeError) -> str:
    if isinstance(error, SchemaError) and error.path:
        return f"{error} (in {error.location()})"
    return str(error)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.settings).update(
            silent=args.silent,
            suppress_swallows=args.suppress_swallows,
            expand_from=args.expand_from,
            show_ancestors=args.show_ancestors,
        )
        logger.debug("Using %s", settings)

        if args.input is None:
            code = read_input(sys.stdin.buffer)
        else:
            try:
                with open(args.input, "rb") as f:
                    code = read_input(f)
            except OSError as e:
                raise InputError(f'I/O Error: "{e}"') from e

        for chunk in render_documents(code, settings):
            sys.stdout.write(chunk)
            sys.stdout.flush()

    except TuiladeError as e:
        print(f"error: {describe(e)}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
