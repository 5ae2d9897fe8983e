"""Self-balancing search tree of event attendees keyed by attendee id."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .people import Attendee

VIP_PRIORITY = 5


@dataclass(eq=False)
class AttendeeNode:
    """One attendee id in the tree, with the attendee record it holds."""

    attendee_id: int
    attendee: Attendee = field(default=None)  # type: ignore[assignment]
    balance: int = 0
    left: AttendeeNode | None = field(default=None, repr=False)
    right: AttendeeNode | None = field(default=None, repr=False)
    parent: AttendeeNode | None = field(default=None, repr=False)
    height: int = 1

    def __post_init__(self) -> None:
        if self.attendee is None:
            self.attendee = Attendee(attendee_id=self.attendee_id)


def _height(node: AttendeeNode | None) -> int:
    return node.height if node else 0


def _update(node: AttendeeNode) -> None:
    left, right = _height(node.left), _height(node.right)
    node.height = 1 + max(left, right)
    node.balance = left - right


class AttendeeTree:
    """An AVL tree of attendees; equal ids are kept to the right."""

    def __init__(self) -> None:
        self.root: AttendeeNode | None = None
        self._size = 0

    def insert(self, attendee_id: int) -> None:
        """Add a new attendee with the given id."""
        self.root = self._insert(self.root, attendee_id)
        self._size += 1

    def _insert(self, node: AttendeeNode | None, attendee_id: int) -> AttendeeNode:
        if node is None:
            return AttendeeNode(attendee_id)
        if attendee_id < node.attendee_id:
            node.left = self._insert(node.left, attendee_id)
            node.left.parent = node
        else:
            node.right = self._insert(node.right, attendee_id)
            node.right.parent = node
        _update(node)
        return self._rebalance(node)

    def _rebalance(self, node: AttendeeNode) -> AttendeeNode:
        _update(node)
        if node.balance > 1:
            if node.left and node.left.balance < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        if node.balance < -1:
            if node.right and node.right.balance > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        return node

    @staticmethod
    def _rotate_left(node: AttendeeNode) -> AttendeeNode:
        new_root = node.right
        assert new_root is not None
        node.right = new_root.left
        if new_root.left:
            new_root.left.parent = node
        new_root.left = node
        new_root.parent = node.parent
        node.parent = new_root
        _update(node)
        _update(new_root)
        return new_root

    @staticmethod
    def _rotate_right(node: AttendeeNode) -> AttendeeNode:
        new_root = node.left
        assert new_root is not None
        node.left = new_root.right
        if new_root.right:
            new_root.right.parent = node
        new_root.right = node
        new_root.parent = node.parent
        node.parent = new_root
        _update(node)
        _update(new_root)
        return new_root

    def register_attendance(self, attendee_id: int) -> bool:
        """Mark the attendee with this id as present; False if not found."""
        node = self.root
        while node:
            if attendee_id == node.attendee_id:
                node.attendee.register_attendance()
                return True
            node = node.left if attendee_id < node.attendee_id else node.right
        return False

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self.root)

    def render(self) -> str:
        """The tree drawn sideways, right subtree on top."""
        if self.root is None:
            return "El árbol está vacío."
        return "\n".join(self._render_lines(self.root, 0))

    def _render_lines(self, node: AttendeeNode | None, level: int) -> Iterator[str]:
        if node is None:
            return
        yield from self._render_lines(node.right, level + 1)
        attended = "Sí" if node.attendee.attended else "No"
        yield (
            f"{'    ' * level}{node.attendee_id} | Prioridad: {node.attendee.priority}"
            f" | Asistió: {attended}"
            f" | Balance: {node.balance}"
        )
        yield from self._render_lines(node.left, level + 1)

    def vips(self) -> list[AttendeeNode]:
        """Nodes whose attendee has VIP priority, in id order."""
        return [node for node in self if node.attendee.priority == VIP_PRIORITY]

    def render_vips(self) -> str:
        """A heading followed by one line per VIP attendee."""
        lines = ["Asistentes VIP:"]
        lines.extend(f"ID: {node.attendee_id} (VIP)" for node in self.vips())
        return "\n".join(lines)

    def __iter__(self) -> Iterator[AttendeeNode]:
        stack: list[AttendeeNode] = []
        node = self.root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __len__(self) -> int:
        return self._size