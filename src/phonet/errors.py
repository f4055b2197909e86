"""디스크립터 파싱 에러 정의."""
# src/phonet/errors.py
from enum import Enum
from pathlib import Path
from typing import Optional

from .problem_details import MachineReadableError, ProblemDetails, ProblemType


class ParseErrorKind(str, Enum):
    """파싱 에러 종류. str 상속으로 JSON 직렬화 시 값(문자열)이 그대로 출력된다."""

    MODE_ALREADY_DEFINED = "ModeAlreadyDefined"
    INVALID_MODE_SPECIFIER = "InvalidModeSpecifier"
    NO_CLASS_NAME = "NoClassName"
    INVALID_CLASS_NAME = "InvalidClassName"
    CLASS_ALREADY_EXISTS = "ClassAlreadyExists"
    NO_CLASS_PATTERN = "NoClassPattern"
    INVALID_TEST_INTENT = "InvalidTestIntent"
    EMPTY_NOTE = "EmptyNote"
    UNKNOWN_STATEMENT_OPERATOR = "UnknownStatementOperator"
    UNKNOWN_CLASS_REFERENCE = "UnknownClassReference"
    RECURSIVE_CLASS_REFERENCE = "RecursiveClassReference"
    PATTERN_COMPILE_ERROR = "PatternCompileError"


# 사용자에게 보여줄 메시지 템플릿 ({value} 자리에 이름/문자/컴파일러 메시지)
_MESSAGES = {
    ParseErrorKind.MODE_ALREADY_DEFINED: "Mode is already defined",
    ParseErrorKind.INVALID_MODE_SPECIFIER: "Invalid mode specifier",
    ParseErrorKind.NO_CLASS_NAME: "No class name given",
    ParseErrorKind.INVALID_CLASS_NAME: "Invalid class name '{value}'",
    ParseErrorKind.CLASS_ALREADY_EXISTS: "Class '{value}' already exists",
    ParseErrorKind.NO_CLASS_PATTERN: "No pattern given for class '{value}'",
    ParseErrorKind.INVALID_TEST_INTENT: "Test intent must be '+' or '!'",
    ParseErrorKind.EMPTY_NOTE: "Note is empty",
    ParseErrorKind.UNKNOWN_STATEMENT_OPERATOR: "Unknown statement operator '{value}'",
    ParseErrorKind.UNKNOWN_CLASS_REFERENCE: "Unknown class '{value}'",
    ParseErrorKind.RECURSIVE_CLASS_REFERENCE: "Class '{value}' references itself",
    ParseErrorKind.PATTERN_COMPILE_ERROR: "Pattern failed to compile: {value}",
}


class DescriptorParseError(Exception):
    """
    디스크립터 파싱 실패. 종류(kind) + 1-based 소스 라인 + 부가 값(value)을 가진다.

    파싱은 all-or-nothing 이므로 첫 에러에서 즉시 raise 되고
    부분 Draft는 만들어지지 않는다.
    """

    def __init__(
        self, kind: ParseErrorKind, line: int, value: Optional[str] = None
    ) -> None:
        self.kind = kind
        self.line = line
        self.value = value
        super().__init__(f"{self.message} (line {line})")

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind].format(value=self.value)

    @property
    def problem(self) -> ProblemDetails:
        """API 응답용 422 ProblemDetails 로 변환한다."""
        return ProblemDetails.single(
            ProblemType.DESCRIPTOR_PARSE_ERROR,
            status=422,
            title="Descriptor failed to parse",
            detail=f"{self.message} at line {self.line}",
            error=MachineReadableError(
                code=self.kind.value,
                target=f"line:{self.line}",
                detail=self.message,
                meta={"line": self.line, "value": self.value},
            ),
            error_class="user_input",
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DescriptorParseError):
            return NotImplemented
        return (self.kind, self.line, self.value) == (
            other.kind,
            other.line,
            other.value,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.line, self.value))


class DescriptorNotFoundError(FileNotFoundError):
    """디스크립터 파일을 찾을 수 없음."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Descriptor file not found: {path}")
