"""
phonet 커맨드라인 진입점.

사용법:
    phonet                         # ./phonet 파일 실행
    phonet -f ./rules.             # ./rules.phonet 실행 (마침표로 끝나면 확장자 추론)
    phonet -do                     # 실패한 테스트만 표시
    phonet kato x10                # 파일의 테스트 대신 인라인 단어 테스트
    phonet -mw                     # 테스트 포함 압축본을 phonet.min.phonet 로 저장

종료 코드: 0 모두 통과 / 1 실패한 테스트 있음 / 2 파싱 에러 또는 파일 없음
"""
# src/phonet/cli.py
import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .display.outcome_renderer import Colors, DisplayLevel, render_outcome
from .errors import DescriptorNotFoundError, DescriptorParseError
from .landing.descriptor_repository import (
    load_descriptor,
    resolve_descriptor_path,
    save_minified,
)
from .logging_setup import configure_logging
from .normalization.minifier import minify_draft
from .parsing.draft_parser import override_tests, parse_draft
from .validation.test_runner import run_draft

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TESTS_FAILED = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phonet",
        description="A program to validate phonotactic patterns",
    )
    parser.add_argument(
        "tests",
        nargs="*",
        help="Custom tests (optional). This overrides all tests in the file.",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=os.getenv("PHONET_FILE", "phonet"),
        help="Name and path of file to run and test. "
        "If name ends with a period, the 'phonet' extension is implied.",
    )
    parser.add_argument(
        "-d",
        "--display-level",
        type=DisplayLevel.from_arg,
        default=DisplayLevel.SHOW_ALL,
        metavar="{show-all,ignore-passes,only-fails,hide-all}",
        help="What types of outputs to display. Options can be single letter.",
    )
    parser.add_argument("-m", "--minify", action="store_true", help="Minify file and save")
    parser.add_argument(
        "-w", "--with-tests", action="store_true", help="Include tests in minified file"
    )
    parser.add_argument(
        "-n",
        "--no-color",
        action="store_true",
        help="Display output in default color. Use for piping standard output to a file.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # load_dotenv 는 os.getenv() 보다 먼저 실행되어야 한다
    load_dotenv()
    configure_logging(os.getenv("LOG_LEVEL", "WARNING"))

    args = _build_parser().parse_args(argv)
    color = not args.no_color

    path = resolve_descriptor_path(args.file)

    try:
        draft = parse_draft(load_descriptor(path))
    except DescriptorNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except DescriptorParseError as e:
        location = f"{path}:{e.line}"
        if color:
            location = f"{Colors.BOLD}{Colors.RED}{location}{Colors.RESET}"
        print(f"{location} {e.kind.value}: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    if args.minify:
        target = save_minified(path, minify_draft(draft, with_tests=args.with_tests))
        print(f"Minified to {target}")

    if args.tests:
        draft = override_tests(draft, args.tests)

    outcome = run_draft(draft)
    for line in render_outcome(outcome, draft.mode, args.display_level, color):
        print(line)

    return EXIT_TESTS_FAILED if outcome.fail_count else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
