"""Linked-list and binary-tree nodes and the exercises on them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Sequence[int | None], root_index: int = 0) -> TreeNode | None:
    """Build a tree from level-order values, where None marks a missing node."""
    if root_index >= len(values) or values[root_index] is None:
        return None
    return TreeNode(
        val=values[root_index],
        left=build_tree(values, 2 * root_index + 1),
        right=build_tree(values, 2 * root_index + 2),
    )


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Unlink repeated values from a sorted list and return its head."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; with two middles, the second one."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow