"""디스크립터 텍스트를 (statement, line) 쌍으로 분리한다."""
# src/phonet/parsing/statements.py
from typing import List, Tuple

# minify 결과물도 다시 파싱되도록 ';' 도 구문 구분자로 취급
STATEMENT_SEPARATOR = ";"

# 이 접두어로 시작하는 statement 는 줄 끝까지 이어진다 (주석, 노트)
LINE_TAIL_OPERATORS = ("#", "*")


def split_statements(text: str) -> List[Tuple[str, int]]:
    """
    원본 텍스트 → [(trim 된 statement, 1-based 라인 번호), ...]

    규칙:
      - 줄바꿈과 ';' 가 statement 경계
      - '#' 주석과 '*' 노트는 ';' 를 포함해도 줄 끝까지 하나의 statement
        예) "+^a$;* CV; no clusters" → ["+^a$", "* CV; no clusters"]
      - 빈 statement 는 버리지만, 이후 statement 의 라인 번호는 그대로 유지
    """
    statements: List[Tuple[str, int]] = []

    for line_no, line in enumerate(text.splitlines(), start=1):
        rest = line.strip()

        while rest:
            if rest.startswith(LINE_TAIL_OPERATORS):
                statements.append((rest, line_no))
                break

            head, _, rest = rest.partition(STATEMENT_SEPARATOR)
            head = head.strip()
            rest = rest.strip()
            if head:
                statements.append((head, line_no))

    return statements
