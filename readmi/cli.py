"""
readmi 명령행 진입점

    readmi [project]                         README 신규 생성
    readmi -u [--mode full|selective|version] 기존 README 업데이트
    readmi --check                           최신성 검사만 수행
"""
import argparse
import sys
from typing import List, Optional

from .config import load_settings
from .logging_config import get_logger, setup_logging
from .update import format_diff_summary
from .workflow import LANGUAGE_NAMES, ReadmeWorkflow, check_readme

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="readmi", description="Generate or update a project README with an LLM")
    parser.add_argument("project", nargs="?", default=".", help="Project root directory")
    parser.add_argument("--update", "-u", action="store_true", help="Update the existing README instead of regenerating it")
    parser.add_argument(
        "--mode",
        choices=["full", "selective", "version"],
        default="full",
        help="Update mode (with --update): full regeneration, selected sections only, or version numbers only",
    )
    parser.add_argument(
        "--sections",
        default="",
        help="Comma-separated section titles to regenerate in selective mode (e.g. 'Installation,Usage')",
    )
    parser.add_argument(
        "--language", "-l",
        default=None,
        help=f"README language code ({', '.join(LANGUAGE_NAMES)})",
    )
    parser.add_argument("--mock", action="store_true", help="Use a template instead of calling the model")
    parser.add_argument(
        "--preserve-header",
        action="store_true",
        default=None,
        help="Keep the existing title block when updating",
    )
    parser.add_argument("--dry-run", "-n", action="store_true", help="Print the result without saving")
    parser.add_argument("--check", action="store_true", help="Only report README staleness issues")
    return parser


def _split_sections(value: str) -> List[str]:
    return [s.strip() for s in value.split(",") if s.strip()]


def _print_issues(issues, suggestions) -> None:
    if not issues:
        print("No issues found", file=sys.stderr)
    for issue in issues:
        print(f"  [{issue.severity.value}] {issue.message}", file=sys.stderr)
    if suggestions:
        print("Sections to review:", file=sys.stderr)
        for suggestion in suggestions:
            print(f"  - {suggestion.name} ({suggestion.priority.value}): {suggestion.reason}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings().with_overrides(
        language=args.language,
        use_mock=True if args.mock else None,
    )
    setup_logging(settings.log_level)
    language = settings.language

    if args.check:
        report = check_readme(args.project, language, settings.max_source_chars)
        if not report["success"]:
            print(f"Error: {report['error']}", file=sys.stderr)
            return 1
        if not report["exists"]:
            print(f"No README found at {report['path']}", file=sys.stderr)
            return 1
        _print_issues(report["issues"], report["suggestions"])
        return 0

    try:
        workflow = ReadmeWorkflow(settings)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.update:
        print(f"Updating existing README ({args.mode})...", file=sys.stderr)
    else:
        print("Generating new README...", file=sys.stderr)

    result = workflow.process(
        args.project,
        mode=args.mode if args.update else None,
        sections_to_update=_split_sections(args.sections),
        language=language,
        dry_run=args.dry_run,
        preserve_header=args.preserve_header,
    )

    if not result["success"]:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1

    if args.update:
        _print_issues(result["issues"], [])
    for line in format_diff_summary(result["diff"]):
        print(f"  {line}", file=sys.stderr)
    if result["preserved_sections"]:
        print(f"  Preserved: {', '.join(result['preserved_sections'])}", file=sys.stderr)

    if args.dry_run:
        print("\n--- GENERATED README (dry run) ---\n", file=sys.stderr)
        print(result["content"])
    else:
        print(f"README {result['action']}: {result['path']}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
