"""
클래스 확장기 (Class Expander)

패턴 안의 클래스 참조(모드 구분자로 감싼 이름, 예: <C>)를
클래스 테이블의 원본 패턴으로 치환한다.

  - 치환 결과는 항상 비캡처 그룹 (?:...) 으로 감싼다
    → 바깥 패턴의 back-reference 그룹 번호가 밀리지 않는다
    → 참조 하나뿐인 별칭 클래스($A = <B>)는 B 의 그룹을 그대로 쓴다
  - 파이썬 재귀 대신 명시적 스택으로 의존 그래프를 깊이 우선 순회한다
    → 수천 단계의 클래스 체인도 RecursionError 없이 펼쳐진다
  - 스택 위에 있는 클래스(in-progress)로 순환 참조를 검출한다
    → 깊이와 상관없이 a → b → c → a 같은 체인도 잡힌다
  - 한 번 펼친 클래스는 캐시하여 같은 클래스를 다시 펼치지 않는다
"""
# src/phonet/parsing/class_expander.py
import re
from functools import lru_cache
from typing import Dict, List, Optional, Set

from ..errors import DescriptorParseError, ParseErrorKind
from ..models.draft_types import ClassTable, Mode


@lru_cache(maxsize=None)
def class_reference_pattern(mode: Mode) -> re.Pattern:
    """
    모드별 클래스 참조 정규식. group(1) 이 클래스 이름.

    ROMANIZED 모드에서 파이썬 named group 문법 (?P<name>...) 은 참조로 보지 않는다.
    """
    return re.compile(
        r"(?<!\?P)" + re.escape(mode.open) + r"(\w+)" + re.escape(mode.close)
    )


class ClassExpander:
    """한 번의 확장 작업(같은 클래스 테이블/모드/라인) 동안 캐시를 공유한다."""

    def __init__(self, classes: ClassTable, mode: Mode, line: int) -> None:
        self._classes = classes
        self._line = line
        self._reference_re = class_reference_pattern(mode)
        # 클래스 이름 → 치환에 쓸 그룹 문자열 "(?:...)"
        self._resolved: Dict[str, str] = {}

    def expand(self, pattern: str) -> str:
        """패턴 안의 모든 클래스 참조를 펼친 문자열을 반환한다."""
        for name in self._reference_re.findall(pattern):
            self._resolve(name)
        return self._reference_re.sub(self._substitute, pattern)

    def _substitute(self, match: re.Match) -> str:
        return self._resolved[match.group(1)]

    def _check_known(self, name: str) -> None:
        if name not in self._classes:
            raise DescriptorParseError(
                ParseErrorKind.UNKNOWN_CLASS_REFERENCE, self._line, name
            )

    def _next_pending(self, name: str) -> Optional[str]:
        """아직 펼치지 않은 첫 번째 의존 클래스 (소스 순서)."""
        for dep in self._reference_re.findall(self._classes[name]):
            if dep not in self._resolved:
                return dep
        return None

    def _resolve(self, name: str) -> None:
        if name in self._resolved:
            return
        self._check_known(name)

        stack: List[str] = [name]
        in_progress: Set[str] = {name}

        while stack:
            current = stack[-1]
            pending = self._next_pending(current)

            if pending is None:
                self._resolved[current] = self._group_for(current)
                stack.pop()
                in_progress.discard(current)
                continue

            if pending in in_progress:
                raise DescriptorParseError(
                    ParseErrorKind.RECURSIVE_CLASS_REFERENCE, self._line, pending
                )
            self._check_known(pending)

            stack.append(pending)
            in_progress.add(pending)

    def _group_for(self, name: str) -> str:
        """의존 클래스가 모두 펼쳐진 상태에서 name 의 그룹 문자열을 만든다."""
        raw = self._classes[name]
        alias = self._reference_re.fullmatch(raw)
        if alias:
            return self._resolved[alias.group(1)]

        body = self._reference_re.sub(self._substitute, raw)
        return f"(?:{body})"


def replace_classes(pattern: str, classes: ClassTable, mode: Mode, line: int) -> str:
    """패턴의 클래스 참조를 모두 치환한다. 실패 시 DescriptorParseError."""
    return ClassExpander(classes, mode, line).expand(pattern)
