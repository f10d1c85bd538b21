import pytest

from dll import ListStore, MarkerSet, Node, NodeStatus, random_value, remap_index


def make(values):
    return ListStore.from_values(values)


def test_initialize_builds_sequential_chain():
    store = ListStore(value_generator=iter([11, 22, 33, 44]).__next__)
    store.initialize(4)
    assert store.values() == [11, 22, 33, 44]
    assert store.next_links == [1, 2, 3, None]
    assert store.prev_links == [None, 0, 1, 2]
    assert store.head_index == 0
    assert store.is_consistent()


def test_initialize_zero_is_empty():
    store = ListStore()
    store.initialize(0)
    assert store.nodes == []
    assert store.head_index is None
    assert store.is_consistent()
    assert store.tail_index() is None


def test_round_trip_traversal_visits_every_slot_in_creation_order():
    store = ListStore()
    store.initialize(7)
    order = list(store.traverse_forward())
    assert order == list(range(7))
    assert len(set(order)) == 7
    assert store.next_links[order[-1]] is None


def test_traversal_restarts_on_each_call():
    store = make([1, 2, 3])
    assert list(store.traverse_forward()) == [0, 1, 2]
    assert list(store.traverse_forward()) == [0, 1, 2]


def test_traversal_stops_on_cycle():
    store = make([1, 2, 3])
    store.next_links[2] = 0
    assert store.order() == [0, 1, 2]


def test_random_value_is_two_digits():
    for _ in range(200):
        assert 10 <= random_value() <= 99


def test_remap_index_rules():
    assert remap_index(None, 2) is None
    assert remap_index(2, 2) is None
    assert remap_index(1, 2) == 1
    assert remap_index(3, 2) == 2


def test_remove_at_remaps_links_head_and_markers():
    store = make([10, 20, 30, 40])
    markers = MarkerSet(head=0, tail=3, current=2, target=1)

    # unlink 20 first, as a delete would
    store.next_links[0] = 2
    store.prev_links[2] = 0
    removed = store.remove_at(1, markers)

    assert removed.value == 20
    assert store.values() == [10, 30, 40]
    assert store.next_links == [1, 2, None]
    assert store.prev_links == [None, 0, 1]
    assert store.head_index == 0
    assert markers.as_dict()["tail"] == 2
    assert markers["current"] == 1
    assert markers["target"] is None
    assert store.is_consistent()


def test_remove_at_nulls_links_to_removed_slot():
    store = make([10, 20, 30])
    store.remove_at(2)
    # 20 still pointed at the removed tail
    assert store.next_links[1] is None
    assert store.values() == [10, 20]


def test_remove_at_surviving_indices_shift_down():
    n, k = 6, 2
    store = make(list(range(100, 100 + n)))
    ids = [node.id for node in store.nodes]
    store.remove_at(k)
    for i, node_id in enumerate(ids):
        if i == k:
            assert node_id not in [node.id for node in store.nodes]
            continue
        new_i = i if i < k else i - 1
        assert store.nodes[new_i].id == node_id


def test_remove_at_resets_statuses():
    store = make([1, 2, 3])
    store.set_statuses({0: NodeStatus.CURRENT, 1: NodeStatus.TARGET})
    store.remove_at(2)
    assert all(n.status is NodeStatus.DEFAULT for n in store.nodes)


def test_remove_at_rejects_bad_index():
    store = make([1, 2])
    with pytest.raises(IndexError):
        store.remove_at(5)


def test_append_creates_detached_slot():
    store = make([1, 2])
    idx = store.append(store.create_node(9))
    assert idx == 2
    assert store.next_links[idx] is None
    assert store.prev_links[idx] is None
    assert store.nodes[idx].status is NodeStatus.NEW_NODE
    assert store.values() == [1, 2]


def test_set_statuses_resets_the_rest():
    store = make([1, 2, 3])
    store.set_statuses({1: NodeStatus.HIGHLIGHT})
    assert [n.status for n in store.nodes] == [
        NodeStatus.DEFAULT, NodeStatus.HIGHLIGHT, NodeStatus.DEFAULT,
    ]


def test_is_consistent_detects_broken_back_link():
    store = make([1, 2, 3])
    store.prev_links[2] = 0
    assert not store.is_consistent()


def test_dict_round_trip():
    store = make([5, 6])
    clone = ListStore.from_dict(store.to_dict())
    assert clone.values() == [5, 6]
    assert clone.nodes[0] == store.nodes[0]


def test_node_ids_are_unique_and_stable():
    a, b = Node(1), Node(1)
    assert a.id != b.id
    a.status = NodeStatus.TARGET
    a.reset()
    assert a.status is NodeStatus.DEFAULT
