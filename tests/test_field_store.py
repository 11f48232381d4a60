"""Tests for field keys and the field value store."""

from blueprint import Feature, Role
from field_store import FieldKey, FieldValueStore, field_keys


def test_get_unknown_key_is_empty():
    store = FieldValueStore()
    assert store.get(FieldKey("User", "Task", "Manage Tasks", "Title")) == ""


def test_set_then_get():
    store = FieldValueStore()
    key = FieldKey("User", "Task", "Manage Tasks", "Title")
    store.set(key, "Buy milk")

    assert store.get(key) == "Buy milk"

    store.set(key, "Buy bread")
    assert store.get(key) == "Buy bread"
    assert len(store) == 1


def test_set_does_not_affect_other_keys():
    store = FieldValueStore()
    title = FieldKey("User", "Task", "Manage Tasks", "Title")
    due = FieldKey("User", "Task", "Manage Tasks", "Due Date")
    admin_title = FieldKey("Admin", "Task", "Manage Tasks", "Title")

    store.set(title, "a")
    store.set(due, "b")
    store.set(admin_title, "c")
    store.set(title, "d")

    assert store.get(due) == "b"
    assert store.get(admin_title) == "c"
    assert store.get(title) == "d"


def test_clear():
    store = FieldValueStore()
    store.set(FieldKey("User", "Task", "Manage Tasks", "Title"), "x")
    store.clear()

    assert len(store) == 0
    assert store.as_dict() == {}


def test_encode_is_collision_free_with_separators():
    """Test labels containing the separator that a plain join would merge."""
    a = FieldKey("A|B", "C", "D", "E")
    b = FieldKey("A", "B|C", "D", "E")
    c = FieldKey("1:A", "", "D", "E")

    assert "|".join(a[:4]) == "|".join(b[:4])
    assert a.encode() != b.encode()
    assert len({a.encode(), b.encode(), c.encode()}) == 3


def test_encode_format():
    assert FieldKey("User", "Task", "Add", "Title").encode() == "4:User|4:Task|3:Add|5:Title|1:0"


def test_field_keys_distinguish_duplicate_labels():
    role = Role(name="User")
    feature = Feature(entity="Contact", name="Add Contact", input_fields=("Phone", "Email", "Phone"))
    keys = field_keys(role, feature)

    assert [k.field for k in keys] == ["Phone", "Email", "Phone"]
    assert [k.occurrence for k in keys] == [0, 0, 1]
    assert len(set(keys)) == 3
    assert keys[0] == FieldKey("User", "Contact", "Add Contact", "Phone", 0)


def test_field_keys_are_stable(todo_blueprint):
    role = todo_blueprint.roles[0]
    feature = role.features[0]

    assert field_keys(role, feature) == field_keys(role, feature)
