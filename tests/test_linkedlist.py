import pytest

from data_structures.core.errors import EmptyStructureError, PositionUnreachableError
from data_structures.linkedlist import ListNode, SinglyLinkedList


@pytest.fixture
def linked_list():
    return SinglyLinkedList(34, 35, 36)


def test_empty_list():
    ll = SinglyLinkedList[int]()
    assert ll.head is None
    assert ll.is_empty()
    assert ll.size() == 0
    assert ll.to_list() == []


def test_construct_in_argument_order(linked_list):
    assert linked_list.head is not None
    assert linked_list.head.value == 34
    assert linked_list.to_list() == [34, 35, 36]
    assert linked_list.size() == 3
    assert len(linked_list) == 3


def test_iteration_yields_nodes(linked_list):
    nodes = list(linked_list)
    assert all(isinstance(node, ListNode) for node in nodes)
    assert [node.value for node in nodes] == [34, 35, 36]
    assert nodes[-1].next is None


def test_to_list_is_idempotent(linked_list):
    assert linked_list.to_list() == linked_list.to_list()
    assert list(linked_list.values()) == [34, 35, 36]


@pytest.mark.parametrize(
    "position, expected",
    [
        (0, 34),
        (1, 35),
        (2, 36),
        (3, None),  # past the tail
        (10, None),
        (-1, None),  # negative
        (-5, None),
    ],
)
def test_find(linked_list, position, expected):
    node = linked_list.find(position)
    if expected is None:
        assert node is None
    else:
        assert node is not None
        assert node.value == expected


def test_insert_after_middle(linked_list):
    linked_list.insert_after(1, -999)
    assert linked_list.to_list() == [34, 35, -999, 36]


def test_insert_after_tail(linked_list):
    linked_list.insert_after(2, 37)
    assert linked_list.to_list() == [34, 35, 36, 37]


def test_insert_after_minus_one_replaces_head(linked_list):
    linked_list.insert_after(-1, 33)
    assert linked_list.head.value == 33
    assert linked_list.to_list() == [33, 34, 35, 36]


def test_insert_at_head_on_empty():
    ll = SinglyLinkedList[str]()
    ll.insert_at_head("A")
    assert ll.to_list() == ["A"]


def test_insert_then_delete_at_head(linked_list):
    prior_head = linked_list.head
    linked_list.insert_at_head(1)
    assert linked_list.find(0).value == 1

    linked_list.delete_at_head()
    assert linked_list.head is prior_head


@pytest.mark.parametrize("position", [3, 4, -2])
def test_insert_after_unreachable_raises(linked_list, position):
    with pytest.raises(PositionUnreachableError) as exc_info:
        linked_list.insert_after(position, 0)

    assert exc_info.value.position == position
    assert linked_list.to_list() == [34, 35, 36]


def test_insert_after_on_empty_raises():
    ll = SinglyLinkedList[int]()
    with pytest.raises(PositionUnreachableError):
        ll.insert_after(0, 1)


def test_delete_after_middle(linked_list):
    linked_list.delete_after(0)
    assert linked_list.to_list() == [34, 36]


def test_delete_after_tail_is_noop(linked_list):
    linked_list.delete_after(2)
    assert linked_list.to_list() == [34, 35, 36]


def test_insert_then_delete_after():
    ll = SinglyLinkedList(34, 35, 36)
    ll.insert_after(1, -999)
    ll.delete_after(2)
    assert ll.to_list() == [34, 35, -999]


@pytest.mark.parametrize("position", [3, 7, -2])
def test_delete_after_unreachable_raises(linked_list, position):
    with pytest.raises(PositionUnreachableError):
        linked_list.delete_after(position)
    assert linked_list.to_list() == [34, 35, 36]


def test_delete_at_head_until_empty(linked_list):
    linked_list.delete_at_head()
    linked_list.delete_at_head()
    linked_list.delete_at_head()
    assert linked_list.is_empty()


def test_delete_head_of_empty_list_raises():
    ll = SinglyLinkedList[int]()
    with pytest.raises(EmptyStructureError):
        ll.delete_at_head()
    with pytest.raises(PositionUnreachableError):
        ll.delete_after(-1)


def test_repr(linked_list):
    assert repr(linked_list) == "SinglyLinkedList([34, 35, 36])"
    assert repr(linked_list.head) == "ListNode(value=34, next=35)"


@pytest.mark.parametrize("position", ["0", 1.0, None, True, False])
def test_non_int_position_is_unreachable(linked_list, position):
    assert linked_list.find(position) is None
    with pytest.raises(PositionUnreachableError):
        linked_list.insert_after(position, 5)
    with pytest.raises(PositionUnreachableError):
        linked_list.delete_after(position)
    assert linked_list.to_list() == [34, 35, 36]
