import logging
from typing import Optional

from ekiroute.core.config import settings


def setup_logging(level: Optional[int] = None) -> None:
    """basicConfig 기반 로깅 설정 (DEBUG 플래그에 따라 레벨 결정)"""
    if level is None:
        level = logging.DEBUG if settings.DEBUG else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
