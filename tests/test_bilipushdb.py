import pytest

from zbplugin.bilipushdb import Push, PushDB


@pytest.fixture
def db(tmp_path):
    with PushDB(tmp_path / "push.db") as store:
        yield store


def test_new_subscription_defaults_to_enabled(db):
    db.insert_or_update({"bilibili_uid": 7, "group_id": 11})
    assert db.buids_by_live() == [7]
    assert db.buids_by_dynamic() == [7]
    assert db.pushes_by_group(11) == [Push(1, 7, 11, 0, 0)]


def test_update_changes_only_given_flags(db):
    db.insert_or_update({"bilibili_uid": 7, "group_id": 11})
    db.insert_or_update({"bilibili_uid": 7, "group_id": 11, "live_disable": 1})
    assert db.buids_by_live() == []
    assert db.buids_by_dynamic() == [7]
    [push] = db.pushes_by_group(11)
    assert (push.live_disable, push.dynamic_disable) == (1, 0)


def test_fully_disabled_subscription_is_not_listed(db):
    db.insert_or_update({"bilibili_uid": 7, "group_id": 11})
    db.insert_or_update(
        {"bilibili_uid": 7, "group_id": 11, "live_disable": 1, "dynamic_disable": 1}
    )
    assert db.pushes_by_group(11) == []


def test_buids_are_distinct_in_first_seen_order(db):
    for buid, gid in [(5, 1), (3, 1), (5, 2), (3, -4)]:
        db.insert_or_update({"bilibili_uid": buid, "group_id": gid})
    assert db.buids_by_live() == [5, 3]
    assert db.buids_by_dynamic() == [5, 3]


def test_groups_by_buid(db):
    db.insert_or_update({"bilibili_uid": 5, "group_id": 1})
    db.insert_or_update({"bilibili_uid": 5, "group_id": -2})
    db.insert_or_update({"bilibili_uid": 5, "group_id": 3, "dynamic_disable": 1})
    assert db.groups_by_buid_and_live(5) == [1, -2, 3]
    assert db.groups_by_buid_and_dynamic(5) == [1, -2]
    assert db.groups_by_buid_and_live(6) == []


def test_insert_up_keeps_first_name(db):
    db.insert_up(9, "first")
    db.insert_up(9, "second")
    db.insert_up(10, "other")
    assert db.all_ups() == {9: "first", 10: "other"}


def test_missing_key_field_raises(db):
    with pytest.raises(ValueError):
        db.insert_or_update({"bilibili_uid": 1})


def test_unknown_field_raises(db):
    with pytest.raises(ValueError):
        db.insert_or_update({"bilibili_uid": 1, "group_id": 2, "colour": 3})


def test_data_persists_across_reopen(tmp_path):
    path = tmp_path / "push.db"
    with PushDB(path) as store:
        store.insert_or_update({"bilibili_uid": 4, "group_id": 8})
        store.insert_up(4, "name")
    with PushDB(path) as store:
        assert store.groups_by_buid_and_dynamic(4) == [8]
        assert store.all_ups() == {4: "name"}