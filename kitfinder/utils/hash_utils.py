"""해싱 유틸리티"""
import hashlib


def hash_string(text: str) -> str:
    """
    문자열을 MD5 해시로 변환

    Args:
        text: 해시할 문자열

    Returns:
        MD5 해시 문자열
    """
    return hashlib.md5(text.encode("utf-8")).hexdigest()
