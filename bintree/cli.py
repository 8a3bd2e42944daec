"""Bintree CLI
---

Command line application for building binary search trees and inspecting
their shape and traversal orders.
"""
from typing import Any, Dict, List, Optional, Sequence

import click
import srsly
from pydantic import ValidationError
from wasabi import msg, table

from . import about
from .config import PrinterConfig
from .core.layout import TreeRenderer
from .core.search import BinarySearchTree
from .core.tree import TRAVERSAL_ORDERS


def load_values(values: Sequence[Any], from_json: Optional[str] = None) -> List[Any]:
    """Combine values given on the command line with a JSON list from a file."""
    result: List[Any] = list(values)
    if from_json is not None:
        data = srsly.read_json(from_json)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON list of values in: {from_json}")
        result.extend(data)
    return result


def load_config(config_file: Optional[str] = None, color: Optional[str] = None) -> PrinterConfig:
    data: Dict[str, Any] = {}
    if config_file is not None:
        data = srsly.read_json(config_file)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in: {config_file}")
    if color is not None:
        data["color"] = color
    return PrinterConfig(**data)


def build_search_tree(values: Sequence[Any]) -> BinarySearchTree:
    tree = BinarySearchTree()
    for value in values:
        tree.add(value)
    return tree


@click.group()
@click.version_option(version=about.__version__)
def cli():
    """
    Bintree - build binary trees and look at them.

    Values are inserted into an unbalanced binary search tree in the order
    given, so the shape of the tree depends on that order.
    """


@cli.command("show")
@click.argument("values", nargs=-1, type=int)
@click.option(
    "from_json",
    "--from-json",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read more values from a file holding a JSON list",
)
@click.option(
    "config_file",
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Printer settings as a JSON object",
)
@click.option("color", "--color", default=None, help="Color for the node labels")
def cli_show(
    values: Sequence[int],
    from_json: Optional[str],
    config_file: Optional[str],
    color: Optional[str],
):
    """Draw the tree built from VALUES, with its size, height, and whether it
    is complete."""
    try:
        config = load_config(config_file, color)
        tree = build_search_tree(load_values(values, from_json))
    except (ValueError, TypeError, ValidationError) as error:
        msg.fail("Could not build the tree", str(error), exits=1)

    msg.divider(f"bintree: {tree.size()} elements")
    if tree.is_empty():
        msg.warn("The tree is empty")
        return
    print(TreeRenderer(config).render(tree))
    header = ("Size", "Height", "Complete")
    data = [(tree.size(), tree.height(), "✔" if tree.is_complete() else "✘")]
    print(table(data, header=header, divider=True, aligns=("c", "c", "c")))


@cli.command("traverse")
@click.argument("values", nargs=-1, type=int)
@click.option(
    "order",
    "--order",
    type=click.Choice(TRAVERSAL_ORDERS),
    default="inorder",
    show_default=True,
    help="The order to visit the elements in",
)
@click.option(
    "from_json",
    "--from-json",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read more values from a file holding a JSON list",
)
def cli_traverse(values: Sequence[int], order: str, from_json: Optional[str]):
    """Print the elements of the tree built from VALUES in the given order."""
    try:
        tree = build_search_tree(load_values(values, from_json))
    except (ValueError, TypeError) as error:
        msg.fail("Could not build the tree", str(error), exits=1)

    msg.info(f"{order} traversal of {tree.size()} elements")
    print(" ".join(str(element) for element in tree.to_list(order)))


if __name__ == "__main__":
    cli()
