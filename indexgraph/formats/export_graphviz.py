"""
Graphviz export for debugging.

Writes a graph in the DOT ``digraph`` language. Rendering the output with
the ``dot`` tool is left to the caller.
"""

import logging
import os
from typing import Union

from ..classes.connection import Connection
from ..core.graph import Graph

logger = logging.getLogger(__name__)


def escape_label(value) -> str:
    """
    Turn a vertex value into a label safe to place between double quotes.

    Args:
        value: Any vertex value, rendered with repr()

    Returns:
        The rendered value with backslashes and double quotes escaped
    """
    return repr(value).replace("\\", "\\\\").replace('"', '\\"')


def export_graphviz(graph: Graph) -> str:
    """
    Render a graph as DOT text.

    One declaration line is written per vertex, then one line per edge.
    Edges of a weighted graph carry their weight as label.

    Args:
        graph: Weighted or unweighted graph

    Returns:
        The DOT description
    """
    lines = ["digraph {"]
    labels = []
    for _, value in graph.iter_vertices():
        label = escape_label(value)
        labels.append(label)
        lines.append(f'  "{label}";')

    for handle in graph.handles():
        source = labels[handle.index]
        for edge in graph.outgoing(handle):
            if isinstance(edge, Connection):
                lines.append(f'  "{source}" -> "{labels[edge.to.index]}" [label="{edge.weight}"];')
            else:
                lines.append(f'  "{source}" -> "{labels[edge.index]}";')

    lines.append("}")
    return "\n".join(lines) + "\n"


def dump_graphviz(graph: Graph, sFilename_out: Union[str, os.PathLike]) -> None:
    """
    Write a graph as DOT text to a file.

    Args:
        graph: Weighted or unweighted graph
        sFilename_out: Output file path, overwritten if it exists
    """
    with open(sFilename_out, "w", encoding="utf-8") as pFile:
        pFile.write(export_graphviz(graph))
    logger.info(f"Graph exported to {sFilename_out}")
