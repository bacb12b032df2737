# zfinder/core/view_tree.py

"""
A plain-data description of what the main window should show.

`render` turns the current selection and pins into a ViewNode. Views only
ever read these nodes; modifiers are added with ordinary functions such as
`when(node, condition, with_modifier("missing"))`.
"""

from dataclasses import dataclass, replace
from typing import Callable, Sequence, Tuple

from .pins import Pin
from .selection import Selection, Selected, ViewKind

# Modifier names understood by the GUI.
MISSING = "missing"


@dataclass(frozen=True)
class ViewNode:
    kind: ViewKind
    pin: Pin | None = None
    pins: Tuple[Pin, ...] = ()
    modifiers: Tuple[str, ...] = ()

    def has(self, modifier: str) -> bool:
        return modifier in self.modifiers


def when(node: ViewNode, condition: bool, transform: Callable[[ViewNode], ViewNode]) -> ViewNode:
    """Returns `transform(node)` if `condition` is true, otherwise `node` unchanged."""
    if condition:
        return transform(node)
    return node


def with_modifier(name: str) -> Callable[[ViewNode], ViewNode]:
    """A transform that tags a node with a modifier."""
    def transform(node: ViewNode) -> ViewNode:
        if name in node.modifiers:
            return node
        return replace(node, modifiers=node.modifiers + (name,))

    return transform


def render(selection: Selection, pins: Sequence[Pin] = ()) -> ViewNode:
    """
    Builds the node for the current state.

    NoSelection renders the pin list; Selected(pin) renders that pin's detail
    view, tagged MISSING when the pin's path is not on disk.
    """
    if isinstance(selection, Selected):
        pin = selection.pin
        node = ViewNode(ViewKind.DETAIL, pin=pin)
        return when(node, not pin.exists(), with_modifier(MISSING))
    return ViewNode(ViewKind.PIN_LIST, pins=tuple(pins))
