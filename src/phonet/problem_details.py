"""
RFC 7807 스타일 에러 모델.

phonet 이 내보내는 에러 응답은 모두 단일 MachineReadableError 를 가진
ProblemDetails 이며, type 은 ProblemType 의 URN 중 하나다.
"""
# src/phonet/problem_details.py
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

ErrorClass = Literal["user_input", "system_bug", "dependency"]


class ProblemType(str, Enum):
    """에러 응답의 type 필드 값 (str Enum 이라 JSON 에는 값으로 직렬화)."""

    DESCRIPTOR_PARSE_ERROR = "urn:phonet:problem:descriptor-parse-error"
    PAYLOAD_TOO_LARGE = "urn:phonet:problem:payload-too-large"
    INTERNAL_ERROR = "urn:phonet:problem:internal-error"


class MachineReadableError(BaseModel):
    """에러 항목 하나. code 는 ParseErrorKind 값 또는 API 레벨 코드."""

    code: str = Field(..., description="에러 코드 (예: 'ClassAlreadyExists')")
    target: Optional[str] = Field(
        None, description="문제 위치 (예: 'line:4', 'descriptor', 'words')"
    )
    detail: Optional[str] = None
    meta: dict = Field(default_factory=dict)


class ProblemDetails(BaseModel):
    type: ProblemType
    title: str
    status: int
    detail: Optional[str] = None
    instance: Optional[str] = None
    errors: List[MachineReadableError] = Field(default_factory=list)
    error_class: Optional[ErrorClass] = None

    @classmethod
    def single(
        cls,
        problem_type: ProblemType,
        status: int,
        title: str,
        error: MachineReadableError,
        error_class: ErrorClass,
        detail: Optional[str] = None,
        instance: Optional[str] = None,
    ) -> "ProblemDetails":
        """에러 하나짜리 응답. error.meta 에 errorClass 를 함께 기록한다."""
        error.meta["errorClass"] = error_class
        return cls(
            type=problem_type,
            title=title,
            status=status,
            detail=detail,
            instance=instance,
            errors=[error],
            error_class=error_class,
        )
