"""Nodes of the beach-line tree used by Fortune's sweep."""

from __future__ import annotations

from typing import Any, Optional

from fieldsim.geometry import VEdge, VPoint


class Parabola:
    """A beach-line node.

    Leaves are parabola arches with a focus ``site``; internal nodes are
    arch intersections carrying an ``edge``. ``circle_event`` is the event at
    which the arch disappears.
    """

    def __init__(self, site: Optional[VPoint] = None) -> None:
        self.site = site
        self.is_leaf = site is not None
        self.edge: Optional[VEdge] = None
        self.circle_event: Optional[Any] = None
        self.parent: Optional[Parabola] = None
        self.left: Optional[Parabola] = None
        self.right: Optional[Parabola] = None

    def set_left(self, node: Parabola) -> None:
        """Attach ``node`` as the left child."""
        self.left = node
        node.parent = self

    def set_right(self, node: Parabola) -> None:
        """Attach ``node`` as the right child."""
        self.right = node
        node.parent = self

    @staticmethod
    def closest_left_leaf(node: Parabola) -> Optional[Parabola]:
        """The nearest leaf to the left of ``node``, or None."""
        return Parabola.left_child(Parabola.left_parent(node))

    @staticmethod
    def closest_right_leaf(node: Parabola) -> Optional[Parabola]:
        """The nearest leaf to the right of ``node``, or None."""
        return Parabola.right_child(Parabola.right_parent(node))

    @staticmethod
    def left_parent(node: Parabola) -> Optional[Parabola]:
        """The nearest ancestor whose subtree lies on the left, or None."""
        parent = node.parent
        if parent is None:
            raise ValueError("node has no parent")
        last = node
        while parent.left is last:
            if parent.parent is None:
                return None
            last = parent
            parent = parent.parent
        return parent

    @staticmethod
    def right_parent(node: Parabola) -> Optional[Parabola]:
        """The nearest ancestor whose subtree lies on the right, or None."""
        parent = node.parent
        if parent is None:
            raise ValueError("node has no parent")
        last = node
        while parent.right is last:
            if parent.parent is None:
                return None
            last = parent
            parent = parent.parent
        return parent

    @staticmethod
    def left_child(node: Optional[Parabola]) -> Optional[Parabola]:
        """The rightmost leaf of the left subtree of ``node``."""
        if node is None:
            return None
        current = node.left
        while not current.is_leaf:
            current = current.right
        return current

    @staticmethod
    def right_child(node: Optional[Parabola]) -> Optional[Parabola]:
        """The leftmost leaf of the right subtree of ``node``."""
        if node is None:
            return None
        current = node.right
        while not current.is_leaf:
            current = current.left
        return current