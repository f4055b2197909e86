"""FastAPI 디스크립터 검증 API 엔드포인트 정의."""
# src/phonet/api/main.py
import logging
import os
import traceback
from typing import Iterable, List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel, Field

from ..errors import DescriptorParseError
from ..logging_setup import configure_logging
from ..problem_details import MachineReadableError, ProblemDetails, ProblemType
from .pipeline import minify_descriptor, run_descriptor, summarize_descriptor, validate_words

load_dotenv()  # .env 파일 로드


logger = logging.getLogger(__name__)
app = FastAPI(title="Phonet Validation API")


# ── 요청 모델 ────────────────────────────────────────────────────────────────
class DescriptorRequest(BaseModel):
    """디스크립터 원문."""

    descriptor: str = Field(..., description="phonet 디스크립터 텍스트")


class RunRequest(DescriptorRequest):
    """테스트 실행 요청. tests 가 있으면 선언된 테스트를 대체한다."""

    tests: Optional[List[str]] = Field(
        None, description="인라인 테스트 단어 (모두 '유효여야 통과'로 실행)"
    )


class ValidateRequest(DescriptorRequest):
    """임의 단어 판정 요청."""

    words: List[str] = Field(default_factory=list, description="판정할 단어 목록")


class MinifyRequest(DescriptorRequest):
    """압축 요청."""

    with_tests: bool = Field(False, description="테스트 포함 여부")


# ── 입력 크기 제한 ───────────────────────────────────────────────────────────
# 역참조/전후방탐색 패턴은 최악의 경우 지수 시간이 걸리므로 입력 크기를 제한한다.
def _max_descriptor_chars() -> int:
    return int(os.getenv("PHONET_MAX_DESCRIPTOR_CHARS", "100000"))


def _max_word_chars() -> int:
    return int(os.getenv("PHONET_MAX_WORD_CHARS", "256"))


def _check_limits(
    instance: str, descriptor: str, words: Iterable[str] = ()
) -> Optional[JSONResponse]:
    """제한을 넘으면 413 ProblemDetails 응답을, 아니면 None 을 반환한다."""
    limit = _max_descriptor_chars()
    if len(descriptor) > limit:
        return _too_large(instance, "descriptor", limit, len(descriptor))

    limit = _max_word_chars()
    for word in words:
        if len(word) > limit:
            return _too_large(instance, "words", limit, len(word))

    return None


def _too_large(instance: str, target: str, limit: int, actual: int) -> JSONResponse:
    problem = ProblemDetails.single(
        ProblemType.PAYLOAD_TOO_LARGE,
        status=413,
        title="Request exceeds configured size limit",
        detail=f"'{target}' is {actual} characters long; the limit is {limit}.",
        instance=instance,
        error=MachineReadableError(
            code="PAYLOAD_TOO_LARGE",
            target=target,
            detail=f"Shorten '{target}' to at most {limit} characters.",
            meta={"expected": limit, "actual": actual},
        ),
        error_class="user_input",
    )
    return JSONResponse(status_code=413, content=problem.model_dump(mode="json"))


def _internal_error(instance: str, exc: Exception) -> JSONResponse:
    """예상하지 못한 예외를 500 ProblemDetails 로 래핑한다."""
    tb_str = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    problem = ProblemDetails.single(
        ProblemType.INTERNAL_ERROR,
        status=500,
        title="Unexpected error while processing descriptor",
        detail=str(exc),
        instance=instance,
        error=MachineReadableError(
            code="UNHANDLED_EXCEPTION",
            target=f"phonet.api{instance}",
            detail="Unhandled exception occurred in the descriptor pipeline.",
            meta={"exceptionType": type(exc).__name__, "traceback": tb_str},
        ),
        error_class="system_bug",
    )
    return JSONResponse(status_code=500, content=problem.model_dump(mode="json"))


@app.on_event("startup")
async def startup_event():
    """FastAPI 시작 시 로깅 초기화."""
    configure_logging()


@app.exception_handler(DescriptorParseError)
async def descriptor_parse_exception_handler(_, exc: DescriptorParseError):
    """디스크립터 파싱 예외 핸들러."""
    # 에러 자체가 ProblemDetails 를 만들 줄 알기 때문에 그대로 반환만 한다.
    logger.info("Descriptor rejected: %s", exc)
    problem = exc.problem
    return JSONResponse(status_code=problem.status, content=problem.model_dump(mode="json"))


@app.get("/", include_in_schema=False)
async def redirect_to_docs():
    """루트 경로를 Swagger docs로 리다이렉트."""
    return RedirectResponse(url="/docs")


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트."""
    return {"status": "ok"}


@app.post("/draft")
async def draft_summary(request: DescriptorRequest):
    """디스크립터 파싱 결과 요약."""
    rejected = _check_limits("/draft", request.descriptor)
    if rejected is not None:
        return rejected

    try:
        return summarize_descriptor(request.descriptor)
    except DescriptorParseError as exc:
        # ✅ 파싱 에러는 전역 핸들러에게 맡긴다
        raise exc
    except Exception as e:  # pylint: disable=broad-exception-caught
        return _internal_error("/draft", e)


@app.post("/run")
async def run_tests(request: RunRequest):
    """선언된(또는 인라인) 테스트 실행."""
    rejected = _check_limits("/run", request.descriptor, request.tests or [])
    if rejected is not None:
        return rejected

    try:
        logger.info("Running descriptor (%d chars)", len(request.descriptor))
        return run_descriptor(request.descriptor, request.tests)
    except DescriptorParseError as exc:
        raise exc
    except Exception as e:  # pylint: disable=broad-exception-caught
        return _internal_error("/run", e)


@app.post("/validate")
async def validate(request: ValidateRequest):
    """임의 단어 판정."""
    rejected = _check_limits("/validate", request.descriptor, request.words)
    if rejected is not None:
        return rejected

    try:
        return {"results": validate_words(request.descriptor, request.words)}
    except DescriptorParseError as exc:
        raise exc
    except Exception as e:  # pylint: disable=broad-exception-caught
        return _internal_error("/validate", e)


@app.post("/minify")
async def minify(request: MinifyRequest):
    """디스크립터 압축."""
    rejected = _check_limits("/minify", request.descriptor)
    if rejected is not None:
        return rejected

    try:
        return {"minified": minify_descriptor(request.descriptor, request.with_tests)}
    except DescriptorParseError as exc:
        raise exc
    except Exception as e:  # pylint: disable=broad-exception-caught
        return _internal_error("/minify", e)
