#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import pytest
from aws_es_handler import URI, Field, Fields


def test_fields_lookup_is_case_insensitive() -> None:
    fields = Fields([Field(name="Content-Type", values=["application/json"])])
    assert "content-type" in fields
    assert fields["CONTENT-TYPE"].values == ["application/json"]
    assert fields["content-type"].name == "Content-Type"


def test_from_mapping_merges_keys_differing_by_case() -> None:
    fields = Fields.from_mapping({"X-Foo": ["a"], "x-foo": ["b"], "Accept": "*/*"})
    assert len(fields) == 2
    assert fields.as_mapping() == {"X-Foo": ["a", "b"], "Accept": ["*/*"]}


def test_set_field_replaces_existing_values() -> None:
    fields = Fields.from_mapping({"x-amz-date": ["old"]})
    fields.set_field(Field(name="X-Amz-Date", values=["new"]))
    assert fields.as_mapping() == {"X-Amz-Date": ["new"]}


def test_copy_is_independent() -> None:
    fields = Fields.from_mapping({"foo": ["bar"]})
    copied = fields.copy()
    copied.extend_field(Field(name="foo", values=["baz"]))
    assert fields["foo"].values == ["bar"]
    assert copied["foo"].values == ["bar", "baz"]


def test_delete_field() -> None:
    fields = Fields.from_mapping({"Foo": ["bar"]})
    del fields["FOO"]
    assert "foo" not in fields
    with pytest.raises(KeyError):
        fields["foo"]


def test_as_tuples_preserves_order() -> None:
    fields = Fields.from_mapping({"b": ["1", "2"], "a": ["3"]})
    assert fields.as_tuples() == [("b", "1"), ("b", "2"), ("a", "3")]


@pytest.mark.parametrize(
    "uri, expected_path, expected_build",
    [
        (URI(host="example.com"), "/", "https://example.com/"),
        (
            URI(scheme="http", host="example.com", path="/a/b", query="x=1"),
            "/a/b?x=1",
            "http://example.com/a/b?x=1",
        ),
    ],
)
def test_uri_rendering(uri: URI, expected_path: str, expected_build: str) -> None:
    assert uri.render_path() == expected_path
    assert uri.build() == expected_build
