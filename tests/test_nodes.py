import pytest

from drills.nodes import ListNode, TreeNode, build_tree, delete_duplicates, middle_node


def _linked(*values):
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def _values(head):
    result = []
    while head is not None:
        result.append(head.val)
        head = head.next
    return result


def test_delete_duplicates_empty():
    assert delete_duplicates(None) is None


def test_delete_duplicates_single_node():
    assert delete_duplicates(ListNode(1)) == ListNode(1)


def test_delete_duplicates_one_duplicate():
    head = ListNode(1, ListNode(2, ListNode(2)))
    assert delete_duplicates(head) == ListNode(1, ListNode(2))


def test_delete_duplicates_runs():
    head = _linked(1, 1, 2, 3, 3, 3, 4)
    assert _values(delete_duplicates(head)) == [1, 2, 3, 4]


@pytest.mark.parametrize(
    "values, expected",
    [
        ((1, 2, 3, 4, 5), [3, 4, 5]),
        ((1, 2, 3, 4, 5, 6), [4, 5, 6]),
        ((7,), [7]),
    ],
)
def test_middle_node(values, expected):
    assert _values(middle_node(_linked(*values))) == expected


def test_middle_node_empty():
    assert middle_node(None) is None


def test_build_tree_complete():
    tree = build_tree([4, 2, 6, 1, 3])
    assert tree == TreeNode(4, TreeNode(2, TreeNode(1), TreeNode(3)), TreeNode(6))


def test_build_tree_with_gaps():
    tree = build_tree([1, 0, 48, None, None, 12, 49])
    assert tree == TreeNode(1, TreeNode(0), TreeNode(48, TreeNode(12), TreeNode(49)))


def test_build_tree_from_subtree_index():
    assert build_tree([4, 2, 6, 1, 3], 1) == TreeNode(2, TreeNode(1), TreeNode(3))


def test_build_tree_empty():
    assert build_tree([]) is None