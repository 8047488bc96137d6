"""카탈로그 파일(TXT/YAML) 로더

텍스트 포맷 (한 줄에 키트 하나, '#' 으로 시작하면 주석):

    Forest Kit, Grass Block, Oak Planks, Stone

YAML 포맷:

    kits:
      - name: Forest Kit
        blocks: [Grass Block, Oak Planks, Stone]
"""
import os
from dataclasses import dataclass
from typing import Optional

import yaml
from pydantic import ValidationError

from kitfinder.core.exceptions import CatalogNotFoundException, CatalogParseException
from kitfinder.core.logging import logger
from kitfinder.engine import Kit, name_collation_key
from kitfinder.schemas.kit_schema import CatalogDocument
from kitfinder.utils.hash_utils import hash_string


YAML_SUFFIXES = (".yaml", ".yml")


@dataclass(frozen=True)
class Catalog:
    """로딩된 카탈로그

    Attributes:
        kits: 이름순 정렬된 키트
        fingerprint: 원문 MD5 (캐시 무효화용)
        source: 로딩한 파일 경로
    """

    kits: tuple[Kit, ...] = ()
    fingerprint: str = ""
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.kits)


EMPTY_CATALOG = Catalog()


def get_project_path(relative_path: str) -> str:
    """프로젝트 루트 기준 절대 경로 반환 (절대 경로는 그대로)"""
    if os.path.isabs(relative_path):
        return relative_path
    # kitfinder/catalog/loader.py -> kitfinder/catalog -> kitfinder -> root
    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(base_dir, relative_path)


def parse_kits_text(text: str) -> list[Kit]:
    """텍스트 카탈로그 파싱

    - 빈 줄, '#' 주석 줄 무시
    - 쉼표로 분리, 첫 필드가 키트 이름, 나머지는 블록
    - 빈 필드 제거
    """
    kits = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        parts = [p.strip() for p in line.split(",")]
        parts = [p for p in parts if p]
        if not parts:
            continue
        kits.append(Kit(name=parts[0], blocks=tuple(parts[1:])))
    return kits


def parse_kits_yaml(text: str) -> list[Kit]:
    """YAML 카탈로그 파싱 및 검증

    Raises:
        CatalogParseException: YAML 문법 오류 또는 스키마 불일치
    """
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        raise CatalogParseException(f"invalid YAML: {e}", line=line)

    if isinstance(data, list):
        data = {"kits": data}
    if not isinstance(data, dict):
        raise CatalogParseException("top-level YAML value must be a mapping with 'kits'")

    try:
        document = CatalogDocument.model_validate(data)
    except ValidationError as e:
        raise CatalogParseException(f"schema mismatch: {e.error_count()} error(s)",
                                    details={"errors": e.errors(include_url=False)})

    return [Kit(name=k.name, blocks=tuple(k.blocks)) for k in document.kits]


def sort_kits(kits: list[Kit]) -> tuple[Kit, ...]:
    """키트 이름 기준 정렬 (대소문자 무시)"""
    return tuple(sorted(kits, key=lambda k: (name_collation_key(k.name), k.name)))


def build_catalog(text: str, fmt: str = "text", source: Optional[str] = None) -> Catalog:
    """원문으로부터 Catalog 생성"""
    if fmt == "yaml":
        kits = parse_kits_yaml(text)
    else:
        kits = parse_kits_text(text)
    return Catalog(kits=sort_kits(kits), fingerprint=hash_string(text), source=source)


def load_catalog(path: str) -> Catalog:
    """카탈로그 파일 로드

    Raises:
        CatalogNotFoundException: 파일 없음
        CatalogParseException: 파싱 실패
    """
    full_path = get_project_path(path)
    if not os.path.exists(full_path):
        logger.warning(f"Catalog not found: {full_path}")
        raise CatalogNotFoundException(full_path)

    with open(full_path, "r", encoding="utf-8") as f:
        text = f.read()

    fmt = "yaml" if full_path.lower().endswith(YAML_SUFFIXES) else "text"
    catalog = build_catalog(text, fmt=fmt, source=full_path)
    logger.info(f"Catalog loaded: {len(catalog)} kits from {full_path} ({fmt})")
    return catalog
