"""Kit Finder - 블록 이름으로 키트를 찾는 퍼지 검색 서비스"""

__version__ = "1.0.0"
