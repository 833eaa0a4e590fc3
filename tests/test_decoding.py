"""Tests for the declarative attribute decoder and its defaulting policy."""

import pytest

from storefront.services.decoding import FieldKind, FieldSpec, decode_attributes


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Python", "Python"),
        ("", ""),
        (42, "42"),
        (1.0, "1"),
        (2.5, "2.5"),
        (float("nan"), ""),
        (None, ""),
        ({"value": "x"}, ""),
        (["a"], ""),
        (True, ""),
    ],
)
def test_text_policy(raw, expected):
    schema = {"title": FieldSpec("title")}
    assert decode_attributes({"title": raw}, schema) == {"title": expected}


def test_missing_text_is_empty_string():
    assert decode_attributes({}, {"title": FieldSpec("title")}) == {"title": ""}


@pytest.mark.parametrize(
    "raw, expected",
    [(3, 3), (2.5, 2.5), ("4", 4), (" 1.5 ", 1.5), ("three", 0), (None, 0), (False, 0), ({}, 0)],
)
def test_number_policy(raw, expected):
    schema = {"duration": FieldSpec("field_duration", FieldKind.NUMBER)}
    assert decode_attributes({"field_duration": raw}, schema)["duration"] == expected


def test_optional_number_treats_zero_and_garbage_as_absent():
    schema = {"rating": FieldSpec("field_rating", FieldKind.OPTIONAL_NUMBER)}
    assert decode_attributes({"field_rating": 4}, schema)["rating"] == 4
    assert decode_attributes({"field_rating": 0}, schema)["rating"] is None
    assert decode_attributes({"field_rating": "n/a"}, schema)["rating"] is None
    assert decode_attributes({}, schema)["rating"] is None


def test_rich_text_reads_value_wrapper():
    schema = {"body": FieldSpec("body", FieldKind.RICH_TEXT)}
    assert decode_attributes({"body": {"value": "<p>Hi</p>", "format": "basic_html"}}, schema) == {
        "body": "<p>Hi</p>"
    }
    assert decode_attributes({"body": {"format": "basic_html"}}, schema) == {"body": ""}
    assert decode_attributes({"body": "<p>bare</p>"}, schema) == {"body": ""}
    assert decode_attributes({}, schema) == {"body": ""}


def test_optional_rich_text_distinguishes_absent_from_empty():
    schema = {"description": FieldSpec("description", FieldKind.OPTIONAL_RICH_TEXT)}
    assert decode_attributes({}, schema)["description"] is None
    assert decode_attributes({"description": {"value": None}}, schema)["description"] == ""
    assert decode_attributes({"description": {"value": "Cloud"}}, schema)["description"] == "Cloud"


def test_enum_defaults_only_when_absent_and_never_checks_membership():
    schema = {"level": FieldSpec("field_level", FieldKind.ENUM, "intermediate")}
    assert decode_attributes({}, schema)["level"] == "intermediate"
    assert decode_attributes({"field_level": None}, schema)["level"] == "intermediate"
    assert decode_attributes({"field_level": "expert"}, schema)["level"] == "expert"
    assert decode_attributes({"field_level": "guru"}, schema)["level"] == "guru"
    assert decode_attributes({"field_level": ["x"]}, schema)["level"] == "intermediate"


def test_string_list_keeps_only_strings():
    schema = {"tags": FieldSpec("field_tags", FieldKind.STRING_LIST)}
    assert decode_attributes({"field_tags": ["a", 1, None, "b"]}, schema)["tags"] == ["a", "b"]
    assert decode_attributes({"field_tags": "a,b"}, schema)["tags"] == []
    assert decode_attributes({}, schema)["tags"] == []


def test_link_accepts_drupal_link_objects_and_plain_strings():
    schema = {"url": FieldSpec("field_registration_url", FieldKind.LINK)}
    assert decode_attributes(
        {"field_registration_url": {"uri": "https://example.com/r", "title": ""}}, schema
    )["url"] == "https://example.com/r"
    assert decode_attributes({"field_registration_url": "https://x.test"}, schema)["url"] == (
        "https://x.test"
    )
    assert decode_attributes({"field_registration_url": ""}, schema)["url"] is None
    assert decode_attributes({}, schema)["url"] is None


def test_tuple_source_uses_first_non_null_attribute():
    schema = {"title": FieldSpec(("field_seo_title", "title"))}
    assert decode_attributes({"title": "Course"}, schema) == {"title": "Course"}
    assert decode_attributes({"field_seo_title": None, "title": "Course"}, schema) == {
        "title": "Course"
    }
    assert decode_attributes({"field_seo_title": "SEO", "title": "Course"}, schema) == {
        "title": "SEO"
    }


def test_non_mapping_attribute_bag_decodes_to_defaults():
    schema = {
        "title": FieldSpec("title"),
        "duration": FieldSpec("field_duration", FieldKind.NUMBER),
    }
    assert decode_attributes(None, schema) == {"title": "", "duration": 0}
    assert decode_attributes(["junk"], schema) == {"title": "", "duration": 0}
