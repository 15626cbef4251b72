"""Unit tests for accessor-name derivation and list ids."""

from __future__ import annotations

import uuid

from hypothesis import given
from hypothesis import strategies as st

from listerkit.kernel import camelize, derive_method_name, new_list_id


class TestDeriveMethodName:
    def test_snake_case_field(self) -> None:
        assert derive_method_name("filter_by", "first_name") == "filterByFirstName"

    def test_camel_case_field_keeps_inner_capitals(self) -> None:
        assert derive_method_name("order_by", "myName") == "orderByMyName"

    def test_getter(self) -> None:
        assert derive_method_name("get", "title") == "getTitle"

    def test_spaces_count_as_separators(self) -> None:
        assert derive_method_name("filter_by", "first name") == "filterByFirstName"

    @given(st.from_regex(r"[a-z][a-z0-9]{0,8}(_[a-z][a-z0-9]{0,8}){0,3}", fullmatch=True))
    def test_result_has_no_separators_and_starts_lower(self, field: str) -> None:
        name = derive_method_name("filter_by", field)
        assert "_" not in name
        assert name.startswith("filterBy")
        assert name[len("filterBy")] == field[0].upper()


class TestCamelize:
    def test_custom_separator(self) -> None:
        assert camelize("order-by-name", separator="-") == "orderByName"

    def test_first_letter_lowered(self) -> None:
        assert camelize("Get_Title") == "getTitle"

    def test_empty(self) -> None:
        assert camelize("") == ""


class TestNewListId:
    def test_is_uuid4(self) -> None:
        assert uuid.UUID(new_list_id()).version == 4

    def test_unique(self) -> None:
        assert new_list_id() != new_list_id()
