from typing import Optional

from . import parser
from .errors import AmbiguousOption
from .spec import Arity, LongSpec

AMBIGUOUS_COLOR = "#f4cccc"

_ARITY_HINTS = {
    Arity.NONE: "",
    Arity.REQUIRED: "=VALUE",
    Arity.OPTIONAL: "[=VALUE]",
}


def _nodeId(prefix: str) -> str:
    return f"--{prefix}"


def view(longOptions: list[str], filename: Optional[str] = None):
    """
    Draws the long options as a prefix tree.

    Every prefix a user could type gets a node. Prefixes that select a
    single option are light grey, full option names are light blue and
    prefixes that are ambiguous are red.

    Args:
        longOptions: Long options, in the format `parser.Parser` accepts.
        filename: Where to render the graph. Nothing is rendered if None.

    Returns:
        The `graphviz.Digraph`.
    """
    from graphviz import Digraph  # type: ignore

    spec = LongSpec.compile(longOptions)

    g = Digraph("longopts", filename=filename)
    g.attr("graph", rankdir="LR")
    g.attr("node", shape="plaintext")
    g.node(_nodeId(""), "<<B>--</B>>", shape="box")

    seen: set[str] = set()
    for opt in spec.options:
        parent = ""
        for n in range(1, len(opt.name) + 1):
            prefix = opt.name[:n]
            if prefix not in seen:
                seen.add(prefix)
                try:
                    resolved = parser.matchLongOption(prefix, spec)
                    if resolved.name == prefix:
                        label = f"<<B>--{prefix}</B>{_ARITY_HINTS[resolved.arity]}>"
                        fillcolor = "lightblue"
                    else:
                        label = f"<--{prefix}<BR/><I>{resolved.label}</I>>"
                        fillcolor = "lightgrey"
                except AmbiguousOption as e:
                    label = f"<--{prefix}<BR/><I>{len(e.candidates)} candidates</I>>"
                    fillcolor = AMBIGUOUS_COLOR

                g.node(_nodeId(prefix), label, style="filled", fillcolor=fillcolor)
                g.edge(_nodeId(parent), _nodeId(prefix))
            parent = prefix

    if filename is not None:
        g.render()

    return g
