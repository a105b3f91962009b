from cafeteria_system.core import TrayStore


def test_sorted_ids_ascending_regardless_of_insert_order():
    store = TrayStore()
    for tray_id in [105, 101, 110, 100, 103]:
        store.insert(tray_id)

    assert store.sorted_ids() == [100, 101, 103, 105, 110]
    assert list(store) == [100, 101, 103, 105, 110]


def test_contains():
    store = TrayStore()
    store.insert(100)
    store.insert(102)

    assert store.contains(100)
    assert 102 in store
    assert 101 not in store
    assert not store.contains(99)
    assert not store.contains(103)


def test_empty_store():
    store = TrayStore()
    assert store.sorted_ids() == []
    assert 100 not in store
    assert len(store) == 0


def test_duplicate_insert_is_ignored():
    store = TrayStore()
    store.insert(100)
    store.insert(101)
    store.insert(100)

    assert store.sorted_ids() == [100, 101]
    assert len(store) == 2


def test_sorted_ids_is_a_snapshot():
    store = TrayStore()
    store.insert(100)
    snapshot = store.sorted_ids()
    store.insert(101)

    assert snapshot == [100]
    assert store.sorted_ids() == [100, 101]
