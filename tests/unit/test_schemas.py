"""Pydantic 스키마 테스트."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from kitfinder.api.routes.kit_routes import to_search_response
from kitfinder.engine import SearchOutcome, SearchStatus, search
from kitfinder.schemas.kit_schema import HealthResponse, KitSchema, KitSearchRequest


def test_kit_schema_strips_blocks():
    kit = KitSchema(name="  Forest Kit ", blocks=[" Stone ", "", "  "])
    assert kit.name == "Forest Kit"
    assert kit.blocks == ["Stone"]


def test_kit_schema_blank_name():
    with pytest.raises(ValidationError):
        KitSchema(name="   ")


def test_search_request_default_query():
    assert KitSearchRequest().query == ""


def test_search_request_accepts_long_query():
    # 길이 제한은 SecurityValidator 가 검사해 오류 응답으로 돌려준다
    assert len(KitSearchRequest(query="a" * 5000).query) == 5000


def test_health_response():
    health = HealthResponse(status="ok", timestamp=datetime.now(), version="1.0.0")
    assert health.kits_loaded == 0


def test_to_search_response_success(forest_kits):
    response = to_search_response(search(forest_kits, "stome oak"))

    assert response.status == "success"
    assert response.message == "1 matching kit"
    kit = response.results[0]
    assert kit.hits_count == 2
    assert [b.block for b in kit.matched_blocks] == ["Oak Planks", "Stone"]
    assert kit.matched_blocks[1].score == pytest.approx(0.8)


def test_to_search_response_empty_states():
    no_catalog = to_search_response(SearchOutcome(status=SearchStatus.NO_CATALOG))
    assert no_catalog.message == "No kits found. Edit kits.txt to add kits."
    assert no_catalog.results == []
