"""Tests for the view helpers of the mock app and requirements steps."""

from blueprint import Blueprint, Feature, Role, summarize
from field_store import FieldKey
from steps.mock_app.helpers import feature_nav_labels, field_widget_key
from steps.requirements.helpers import FEATURE_TABLE_COLUMNS, blueprint_table, summary_counts


def test_field_widget_key_changes_per_request():
    key = FieldKey("User", "Task", "Manage Tasks", "Title")

    assert field_widget_key(1, key) != field_widget_key(2, key)
    assert field_widget_key(1, key) == f"field-1-{key.encode()}"


def test_feature_nav_labels_fall_back_to_name():
    role = Role(
        name="User",
        features=(
            Feature(entity="Task", name="Manage Tasks"),
            Feature(entity="", name="Settings"),
            Feature(entity="", name=""),
        ),
    )

    assert feature_nav_labels(role) == ["Task", "Settings", "Form 3"]


def test_blueprint_table(uneven_blueprint):
    df = blueprint_table(uneven_blueprint)

    assert list(df.columns) == FEATURE_TABLE_COLUMNS
    assert len(df) == 4
    assert df.iloc[0]["role"] == "Doctor"
    assert df.iloc[3]["role"] == "Receptionist"
    assert df.iloc[0]["buttons"] == "Save"


def test_blueprint_table_empty():
    df = blueprint_table(Blueprint(app_name="Empty"))

    assert df.empty
    assert list(df.columns) == FEATURE_TABLE_COLUMNS


def test_summary_counts(uneven_blueprint):
    counts = summary_counts(summarize(uneven_blueprint))

    assert counts == {"Roles": 2, "Entities": 3, "Features": 3}
