"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 카탈로그/서비스 픽스처
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from kitfinder.catalog import build_catalog  # noqa: E402
from kitfinder.engine import Kit  # noqa: E402
from kitfinder.services import CatalogService, SearchCache  # noqa: E402
from tests.fixtures.kits import FOREST_CATALOG, SAMPLE_KITS_TEXT  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def forest_kits() -> list[Kit]:
    return [Kit(name=k["name"], blocks=tuple(k["blocks"])) for k in FOREST_CATALOG]


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "kits.txt"
    path.write_text(SAMPLE_KITS_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def catalog_service(catalog_file: Path) -> CatalogService:
    service = CatalogService(catalog_path=str(catalog_file), cache=SearchCache(max_size=16))
    service.reload()
    return service


@pytest.fixture
def sample_catalog():
    return build_catalog(SAMPLE_KITS_TEXT)
