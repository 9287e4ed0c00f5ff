import pytest

from algonotes.trees import (
    TreeNode,
    build_tree,
    from_level_order,
    inorder_traversal,
    postorder_traversal,
    preorder_traversal,
    right_side_view,
)

SAMPLE_TREES = [
    [1, None, 2, 3],
    [1, 2, 3, 4, 5, None, 8, None, None, 6, 7, 9],
    [1],
    [4, 2, 6, 1, 3, 5, 7],
    [5, 4, None, 3, None, 2, None, 1],
]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, None, 2, 3], [3, 2, 1]),
        ([1, 2, 3, 4, 5, None, 8, None, None, 6, 7, 9], [4, 6, 7, 5, 2, 9, 8, 3, 1]),
        ([], []),
        ([1], [1]),
    ],
)
def test_postorder_cases(values, expected):
    assert postorder_traversal(from_level_order(values)) == expected


def test_from_level_order_structure():
    root = from_level_order([1, None, 2, 3])
    assert root == TreeNode(1, None, TreeNode(2, TreeNode(3)))


def test_from_level_order_empty_and_leading_none():
    assert from_level_order([]) is None
    assert from_level_order([None, 1]) is None


def test_inorder_of_search_tree_is_sorted():
    values = [4, 2, 6, 1, 3, 5, 7]
    assert inorder_traversal(from_level_order(values)) == sorted(values)


def test_inorder_small_case():
    assert inorder_traversal(from_level_order([1, None, 2, 3])) == [1, 3, 2]


def test_inorder_leaves_tree_unchanged():
    root = from_level_order([1, 2, 3, 4, 5])
    snapshot = from_level_order([1, 2, 3, 4, 5])
    first = inorder_traversal(root)
    assert inorder_traversal(root) == first
    assert root == snapshot


def test_preorder_small_case():
    assert preorder_traversal(from_level_order([1, None, 2, 3])) == [1, 2, 3]


def test_preorder_root_first_postorder_root_last():
    root = from_level_order([1, 2, 3, 4, 5, None, 8, None, None, 6, 7, 9])
    assert preorder_traversal(root)[0] == root.val
    assert postorder_traversal(root)[-1] == root.val


def test_right_side_view_case():
    assert right_side_view(from_level_order([1, 2, 3, None, 5, None, 4])) == [1, 3, 4]


def test_right_side_view_left_chain_sees_every_node():
    values = [5, 4, None, 3, None, 2, None, 1]
    root = from_level_order(values)
    assert right_side_view(root) == [v for v in values if v is not None]


def test_right_side_view_empty():
    assert right_side_view(None) == []


@pytest.mark.parametrize("values", SAMPLE_TREES)
def test_build_tree_round_trip(values):
    original = from_level_order(values)
    rebuilt = build_tree(preorder_traversal(original), inorder_traversal(original))
    assert rebuilt == original


def test_build_tree_empty():
    assert build_tree([], []) is None


def test_build_tree_length_mismatch():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])


def test_build_tree_inconsistent_traversals():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1, 3])