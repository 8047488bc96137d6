"""Text cleaning helpers."""

from __future__ import annotations

import re
import unicodedata


def normalize(text: str) -> str:
    """
    비교용 정규화: 소문자화 + NFKC + 공백 정리

    예시:
    - "  Oak   Planks " -> "oak planks"
    - "Ｓｔｏｎｅ" -> "stone" (전각 문자)

    Args:
        text: 원본 문자열

    Returns:
        정규화된 문자열
    """
    if not text:
        return ""

    normalized = unicodedata.normalize("NFKC", text.lower())

    # 다중 공백을 단일 공백으로
    normalized = re.sub(r"\s+", " ", normalized)

    return normalized.strip()


def singularize(text: str) -> str:
    """
    아주 가벼운 영어 단수화 (첫 번째로 맞는 규칙만 적용)

    - "berries" -> "berry"
    - "classes" -> "class"
    - "boxes" -> "box", "torches" -> "torch", "bushes" -> "bush"
    - "stones" -> "stone"
    - "planks" -> "plank"

    형태소 분석기가 아니라 검색어/카탈로그의 단복수 차이를 맞추기 위한 휴리스틱입니다.
    규칙 순서와 길이 조건을 바꾸면 랭킹 결과가 달라집니다.
    """
    if text.endswith("ies") and len(text) > 3:
        return text[:-3] + "y"
    if text.endswith("sses"):
        return text[:-2]
    if text.endswith(("xes", "ches", "shes")):
        return text[:-2]
    if text.endswith("es") and len(text) > 3:
        return text[:-2]
    if text.endswith("s") and len(text) > 3:
        return text[:-1]
    return text


def canonicalize(text: str) -> str:
    """normalize 후 singularize"""
    return singularize(normalize(text))
