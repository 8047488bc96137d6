"""로깅 설정"""
import logging
import sys
import os
from kitfinder.core.config import settings


# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"


def setup_logging() -> logging.Logger:
    """로거 초기화 및 설정"""

    logger = logging.getLogger("kit_finder")

    # Production에서는 최소 INFO 레벨
    log_level = settings.log_level.upper()
    if IS_PRODUCTION and log_level == "DEBUG":
        log_level = "INFO"

    level = getattr(logging, log_level, logging.INFO)
    logger.setLevel(level)

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if IS_PRODUCTION:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(console_handler)

    return logger


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """사용자 입력을 로깅용 문자열로 변환

    Args:
        value: 로깅할 문자열
        max_length: 최대 길이

    Returns:
        개행 제거 및 절단된 문자열
    """
    if not value:
        return "[empty]"

    # 로그 라인 위조 방지
    result = value.replace("\r", " ").replace("\n", " ")

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
