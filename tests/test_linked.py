import pytest

from dailyalgos.linked import (
    ListNode,
    build_list,
    build_tree,
    insert_greatest_common_divisors,
    is_sub_path,
    kth_largest_level_sum,
    list_values,
    modified_list,
    spiral_matrix,
    split_list_to_parts,
)


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4, 5]])
def test_build_list_round_trip(values):
    assert list_values(build_list(values)) == values


def test_list_node_iterates_values():
    assert list(ListNode(1, ListNode(2))) == [1, 2]


def test_build_tree_level_order():
    root = build_tree([1, 2, 3, None, 4])
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left is None
    assert root.left.right.val == 4


def test_build_tree_empty():
    assert build_tree([]) is None


def test_modified_list_removes_given_values():
    head = build_list([1, 2, 3, 4, 5])
    assert list_values(modified_list([1, 2, 3], head)) == [4, 5]


def test_modified_list_scattered_values():
    head = build_list([1, 2, 1, 2, 1, 2])
    assert list_values(modified_list([1], head)) == [2, 2, 2]


def test_modified_list_all_removed():
    assert modified_list([5], build_list([5, 5])) is None


def test_insert_gcd_example():
    head = build_list([18, 6, 10, 3])
    assert list_values(insert_greatest_common_divisors(head)) == [18, 6, 6, 2, 10, 1, 3]


def test_insert_gcd_single_node_unchanged():
    assert list_values(insert_greatest_common_divisors(build_list([7]))) == [7]


def test_insert_gcd_length_doubles_minus_one():
    values = [12, 8, 30, 45, 9]
    result = list_values(insert_greatest_common_divisors(build_list(values)))
    assert len(result) == 2 * len(values) - 1
    assert result[::2] == values


def test_kth_largest_level_sum_chain():
    root = build_tree([1, 2, None, 3])
    assert kth_largest_level_sum(root, 1) == 3
    assert kth_largest_level_sum(root, 3) == 1


def test_kth_largest_level_sum_too_few_levels():
    assert kth_largest_level_sum(build_tree([1, 2, None, 3]), 4) == -1


def test_kth_largest_level_sum_rejects_zero_k():
    with pytest.raises(ValueError):
        kth_largest_level_sum(build_tree([1]), 0)


SUBPATH_TREE = [1, 4, 4, None, 2, 2, None, 1, None, 6, 8, None, None, None, None, 1, 3]


@pytest.mark.parametrize(
    "values, expected",
    [([4, 2, 8], True), ([1, 4, 2, 6], True), ([1, 4, 2, 6, 8], False)],
)
def test_is_sub_path(values, expected):
    assert is_sub_path(build_list(values), build_tree(SUBPATH_TREE)) is expected


def test_is_sub_path_empty_tree():
    assert is_sub_path(build_list([1]), None) is False


def test_spiral_matrix_example():
    head = build_list([3, 0, 2, 6, 8, 1, 7, 9, 4, 2, 5, 5, 0])
    assert spiral_matrix(3, 5, head) == [
        [3, 0, 2, 6, 8],
        [5, 0, -1, -1, 1],
        [5, 2, 4, 9, 7],
    ]


def test_spiral_matrix_single_row():
    assert spiral_matrix(1, 4, build_list([0, 1, 2])) == [[0, 1, 2, -1]]


def test_spiral_matrix_fills_every_cell_once():
    values = list(range(1, 5 * 4 + 1))
    matrix = spiral_matrix(5, 4, build_list(values))
    assert sorted(v for row in matrix for v in row) == values


def test_split_more_parts_than_nodes():
    parts = split_list_to_parts(build_list([1, 2, 3]), 5)
    assert [list_values(p) for p in parts] == [[1], [2], [3], [], []]


def test_split_uneven():
    parts = split_list_to_parts(build_list(list(range(1, 11))), 3)
    assert [list_values(p) for p in parts] == [[1, 2, 3, 4], [5, 6, 7], [8, 9, 10]]


@pytest.mark.parametrize("length, k", [(0, 3), (7, 7), (11, 4), (20, 6)])
def test_split_invariants(length, k):
    values = list(range(length))
    parts = [list_values(p) for p in split_list_to_parts(build_list(values), k)]
    assert len(parts) == k
    assert [v for part in parts for v in part] == values
    sizes = [len(part) for part in parts]
    assert max(sizes) - min(sizes) <= 1
    assert sizes == sorted(sizes, reverse=True)


def test_split_rejects_zero_parts():
    with pytest.raises(ValueError):
        split_list_to_parts(build_list([1]), 0)