"""Tests de normalización de listados."""

from __future__ import annotations

import pytest

from promptly.adapters.pagination import as_list, normalize_list_response
from promptly.core.domain.blog import BlogPost
from promptly.core.domain.common import DEFAULT_META
from promptly.core.errors import PromptlyError


def _dump(raw):
    return normalize_list_response(raw).model_dump(by_alias=True)


class TestNormalizeListResponse:
    def test_none_gives_default_meta(self) -> None:
        assert _dump(None) == {
            "data": [],
            "meta": {"current_page": 1, "last_page": 1, "per_page": 15, "total": 0, "from": None, "to": None},
        }

    def test_bare_array_computes_counters(self) -> None:
        assert _dump([1, 2, 3]) == {
            "data": [1, 2, 3],
            "meta": {"current_page": 1, "last_page": 1, "per_page": 15, "total": 3, "from": 1, "to": 3},
        }

    def test_empty_array_has_null_from_and_to(self) -> None:
        meta = _dump([])["meta"]
        assert meta["total"] == 0
        assert meta["from"] is None
        assert meta["to"] is None

    def test_nested_meta_is_preserved(self) -> None:
        meta = {"current_page": 2, "last_page": 5, "per_page": 10, "total": 42, "from": 11, "to": 20}
        result = _dump({"data": [{"id": 1}], "meta": meta})
        assert result["data"] == [{"id": 1}]
        assert result["meta"] == meta

    def test_flat_paginator_fields(self) -> None:
        result = _dump({"data": [{"id": 1}], "current_page": 2, "total": 1})
        assert result["meta"] == {
            "current_page": 2,
            "last_page": 1,
            "per_page": 15,
            "total": 1,
            "from": 1,
            "to": 1,
        }

    def test_nested_meta_wins_over_flat_fields(self) -> None:
        result = _dump({"data": [], "meta": {"current_page": 3}, "current_page": 9, "last_page": 7})
        assert result["meta"]["current_page"] == 3
        assert result["meta"]["last_page"] == 7

    def test_null_values_fall_through(self) -> None:
        result = _dump({"data": [1, 2], "meta": {"total": None}, "total": None})
        assert result["meta"]["total"] == 2

    def test_object_without_data_array(self) -> None:
        assert _dump({}) == {"data": [], "meta": DEFAULT_META}
        assert _dump({"data": {"id": 1}})["data"] == []

    @pytest.mark.parametrize("raw", ["text", 42, 3.5, True])
    def test_scalars_give_default_shape(self, raw) -> None:
        assert _dump(raw) == {"data": [], "meta": DEFAULT_META}

    def test_every_meta_field_is_present(self) -> None:
        for raw in (None, [], [1], {}, {"data": [1]}, {"meta": "broken"}):
            meta = _dump(raw)["meta"]
            assert set(meta) == {"current_page", "last_page", "per_page", "total", "from", "to"}
            assert isinstance(_dump(raw)["data"], list)

    def test_items_are_validated_into_model(self) -> None:
        result = normalize_list_response([{"id": 7, "title": "Hola"}], BlogPost)
        assert isinstance(result.data[0], BlogPost)
        assert result.data[0].title == "Hola"

    def test_invalid_items_raise_parse_error(self) -> None:
        with pytest.raises(PromptlyError) as exc_info:
            normalize_list_response([{"title": "sin id"}], BlogPost)
        assert exc_info.value.status == 0


class TestAsList:
    def test_array_and_wrapped_array(self) -> None:
        assert as_list(["a", "b"], str) == ["a", "b"]
        assert as_list({"data": ["c"]}, str) == ["c"]

    def test_missing_payload_is_empty(self) -> None:
        assert as_list(None) == []
        assert as_list({"message": "ok"}) == []
