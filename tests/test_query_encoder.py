"""Tests for JSON:API query string encoding."""

from urllib.parse import parse_qsl, urlsplit

from storefront.schemas.query import FilterCondition, PageParams, QueryParams
from storefront.services.query_encoder import build_url, encode_query


def test_none_params_encode_to_nothing():
    assert encode_query(None) == []
    assert encode_query(QueryParams()) == []


def test_scalar_filter_is_equality_shorthand():
    pairs = encode_query(QueryParams(filter={"field_slug": "python-basics"}))
    assert pairs == [("filter[field_slug]", "python-basics")]


def test_list_filter_expands_to_in_condition_in_order():
    pairs = encode_query(QueryParams(filter={"field_level": ["beginner", "expert", "advanced"]}))
    assert pairs == [
        ("filter[field_level][operator]", "IN"),
        ("filter[field_level][value][0]", "beginner"),
        ("filter[field_level][value][1]", "expert"),
        ("filter[field_level][value][2]", "advanced"),
    ]


def test_scalar_condition_emits_operator_and_value():
    params = QueryParams(
        filter={"field_start_date": FilterCondition(operator=">=", value="2024-01-10")}
    )
    assert encode_query(params) == [
        ("filter[field_start_date][operator]", ">="),
        ("filter[field_start_date][value]", "2024-01-10"),
    ]


def test_list_condition_emits_enumerated_values():
    params = QueryParams(
        filter={"field_status": {"operator": "NOT IN", "value": ["cancelled", "draft"]}}
    )
    assert encode_query(params) == [
        ("filter[field_status][operator]", "NOT IN"),
        ("filter[field_status][value][0]", "cancelled"),
        ("filter[field_status][value][1]", "draft"),
    ]


def test_include_and_sort_are_comma_joined_preserving_order():
    params = QueryParams(include=["field_image", "field_category"], sort=["-created", "title"])
    assert encode_query(params) == [
        ("include", "field_image,field_category"),
        ("sort", "-created,title"),
    ]


def test_empty_include_and_sort_are_omitted():
    assert encode_query(QueryParams(include=[], sort=[])) == []


def test_zero_page_values_are_treated_as_absent():
    assert encode_query(QueryParams(page=PageParams(limit=0, offset=0))) == []
    assert encode_query(QueryParams(page=PageParams(limit=5))) == [("page[limit]", "5")]
    assert encode_query(QueryParams(page=PageParams(limit=5, offset=20))) == [
        ("page[limit]", "5"),
        ("page[offset]", "20"),
    ]


def test_sparse_fieldsets_one_param_per_type():
    params = QueryParams(
        fields={"node--course": ["title", "field_slug"], "file--file": ["uri"]}
    )
    assert encode_query(params) == [
        ("fields[node--course]", "title,field_slug"),
        ("fields[file--file]", "uri"),
    ]


def test_build_url_targets_jsonapi_path_and_strips_trailing_slash():
    url = build_url("https://cms.test/", "/node/course")
    assert url == "https://cms.test/jsonapi/node/course"


def test_scalar_filters_round_trip_through_query_string():
    filters = {
        "field_slug": "c# & .net",
        "field_category.field_slug": "cloud/azure",
        "title": "Ünïcode? yes=please",
    }
    url = build_url("https://cms.test", "/node/course", QueryParams(filter=filters))

    parsed = dict(parse_qsl(urlsplit(url).query))

    assert parsed == {f"filter[{key}]": value for key, value in filters.items()}
