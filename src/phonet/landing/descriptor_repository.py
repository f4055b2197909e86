"""디스크립터 파일 입출력."""
# src/phonet/landing/descriptor_repository.py
import logging
from pathlib import Path
from typing import Union

from ..errors import DescriptorNotFoundError

logger = logging.getLogger(__name__)

DESCRIPTOR_EXTENSION = "phonet"
MINIFIED_SUFFIX = f".min.{DESCRIPTOR_EXTENSION}"


def resolve_descriptor_path(name: Union[str, Path]) -> Path:
    """
    파일명 → 실제 경로. 확장자 추론 규칙:
      "./rules."  → "./rules.phonet"   (마침표로 끝날 때만 확장자 붙이기)
      "./rules"   → "./rules"          (그대로)
      "./a.txt"   → "./a.txt"          (그대로)
    """
    name = str(name)
    if name.endswith("."):
        return Path(name + DESCRIPTOR_EXTENSION)
    return Path(name)


def load_descriptor(path: Path) -> str:
    """디스크립터 파일을 UTF-8 로 읽는다."""
    if not path.is_file():
        raise DescriptorNotFoundError(path)

    text = path.read_text(encoding="utf-8")
    logger.info("Loaded descriptor: %s (%d chars)", path, len(text))
    return text


def save_minified(source_path: Path, minified: str) -> Path:
    """
    압축 결과를 원본 옆에 저장한다.
    파일명: {stem}.min.phonet
      rules.phonet    → rules.min.phonet
      my.rules.phonet → my.rules.min.phonet   (마지막 .phonet 만 제거)
      rules           → rules.min.phonet
    """
    if source_path.suffix == f".{DESCRIPTOR_EXTENSION}":
        stem = source_path.stem
    else:
        stem = source_path.name
    target = source_path.with_name(stem + MINIFIED_SUFFIX)
    target.write_text(minified, encoding="utf-8")
    logger.info("Saved minified descriptor: %s", target)
    return target
