"""
Export formats for graphs.
"""

from .export_graphviz import export_graphviz, dump_graphviz

__all__ = [
    'export_graphviz',
    'dump_graphviz',
]
