"""renderer registry and tree-to-HTML dispatch."""

from typing import Any, Callable, TypeVar

from markdown_utilities.core.nodes import Node

NodeRenderer = Callable[[Any], str]

F = TypeVar("F", bound=NodeRenderer)


class RendererRegistry:
    """registry mapping node classes to render functions."""

    def __init__(self) -> None:
        self._renderers: dict[type, NodeRenderer] = {}

    def register(self, node_type: type, func: NodeRenderer) -> None:
        """registers a render function for a node class."""
        if node_type in self._renderers:
            raise ValueError(f"Renderer already registered for {node_type.__name__}")
        self._renderers[node_type] = func

    def registered_types(self) -> frozenset[type]:
        """returns node classes with a registered renderer."""
        return frozenset(self._renderers)

    def render(self, node: Node) -> str:
        """
        renders a node to HTML using the renderer for its class.

        Args:
            node: document tree node

        Returns:
            rendered HTML string

        Raises:
            TypeError: if no renderer handles the node's class
        """
        func = self._renderers.get(type(node))
        if func is None:
            raise TypeError(f"No renderer registered for {type(node).__name__}")
        return func(node)

    def render_children(self, children: tuple[Node, ...]) -> str:
        """renders child nodes in document order and concatenates the results."""
        return "".join(self.render(child) for child in children)


# global registry
registry = RendererRegistry()


def renders(
    node_type: type, target_registry: RendererRegistry = registry
) -> Callable[[F], F]:
    """
    decorator to register a node render function.

    Args:
        node_type: node class handled by the function
        target_registry: registry to register with (defaults to global)

    Returns:
        decorator function
    """

    def decorator(func: F) -> F:
        target_registry.register(node_type, func)
        return func

    return decorator


def render(node: Node) -> str:
    """renders a document tree node to an HTML string."""
    return registry.render(node)


def render_children(children: tuple[Node, ...]) -> str:
    """renders children with the global registry."""
    return registry.render_children(children)


# populates the global registry
from markdown_utilities.renderers import (  # noqa: E402,F401  pylint: disable=wrong-import-position,unused-import
    blocks,
    inlines,
    media,
)

__all__ = ["RendererRegistry", "registry", "renders", "render", "render_children"]
