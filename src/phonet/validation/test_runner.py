"""Draft 에 선언된 테스트를 실행해 Outcome 을 만든다."""
# src/phonet/validation/test_runner.py
import logging
from typing import List, Sequence

from ..models.draft_types import Draft, Info, Message, Rule, Test, TestDraft
from ..models.outcome_types import FailKind, Outcome, PassStatus, TestOutcome
from .rule_validator import Validity, validate_word

logger = logging.getLogger(__name__)


def get_status(validity: Validity, intent: bool) -> PassStatus:
    """
    Validity + 테스트 intent → PassStatus.

    통과 조건: not (유효 XOR intent)
      - intent=False(유효여야 함) 이고 유효 → 통과
      - intent=True (무효여야 함) 이고 무효 → 통과
    """
    if not (validity.is_valid ^ intent):
        return PassStatus.passed()

    # 유효했지만 무효여야 했음
    if validity.is_valid:
        return PassStatus.failed(FailKind.should_be_invalid())

    # 무효였지만 유효여야 했음 → 걸린 규칙의 note 를 사유로
    if validity.note is not None:
        return PassStatus.failed(FailKind.custom_reason(validity.note))
    return PassStatus.failed(FailKind.no_reason_given())


def run_test(test: TestDraft, rules: Sequence[Rule]) -> TestOutcome:
    """TestDraft 하나를 규칙에 대해 실행한다."""
    validity = validate_word(test.word, rules)
    return TestOutcome(
        word=test.word,
        intent=test.intent,
        status=get_status(validity, test.intent),
    )


def run_draft(draft: Draft) -> Outcome:
    """
    모든 메시지를 순서대로 처리한다.
    Info 는 그대로 복사되고, Test 는 실행 결과로 교체된다 (위치 1:1 대응).
    """
    messages: List[Message[TestOutcome]] = []
    fail_count = 0

    for msg in draft.messages:
        if isinstance(msg, Info):
            messages.append(msg)
            continue

        outcome = run_test(msg.value, draft.rules)
        if outcome.status.is_fail:
            fail_count += 1
        messages.append(Test(outcome))

    logger.info("Ran %d tests: %d failed", draft.test_count, fail_count)

    return Outcome(messages=tuple(messages), fail_count=fail_count)
