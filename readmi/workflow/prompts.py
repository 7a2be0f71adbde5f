"""README 생성 프롬프트와 후처리

1. 강한 SYSTEM 역할: 실제 코드 기반, 구조/포맷 규칙 고정, 목차 금지.
2. USER 프롬프트: ProjectInfo 를 섹션별 컨텍스트 블록으로 압축.
3. 후처리: 모델 출력의 래핑 코드펜스/목차 제거, 언어 태그 보정, 푸터 추가.
"""
import re
from typing import List, Optional, Tuple

from ..project import ProjectInfo, determine_project_type, generate_badges
from ..update.section_parser import match_heading, normalize_title

MAX_PROMPT_SOURCE_FILES = 5

LANGUAGE_NAMES = {
    "en": "English",
    "es": "Spanish (Español)",
    "fr": "French (Français)",
    "de": "German (Deutsch)",
    "zh": "Chinese (中文)",
    "ja": "Japanese (日本語)",
    "pt": "Portuguese (Português)",
    "ru": "Russian (Русский)",
    "hi": "Hindi (हिन्दी)",
    "ar": "Arabic (العربية)",
}

FOOTER = "---\n\n**Made with ❤️ using [readmi](https://github.com/jayanithu/readmi)**"

TOC_TITLES = {"table of contents", "contents", "toc"}

FENCE = "```"


def get_language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, code)


# ============================================================
# System Role
# ============================================================
SYSTEM_ROLE = (
    "You are an expert technical writer who writes professional, concise and accurate README files.\n"
    "Rules:\n"
    "- Analyze the provided source code to understand what the project actually does\n"
    "- Extract real features and usage from the code, never generic ones\n"
    "- Only include sections that are relevant and useful\n"
    "- Use emojis in section headers to keep the README scannable\n"
    "- DO NOT include a Table of Contents section\n"
    "\n"
    "Code block rules:\n"
    "- Every code block MUST have a language tag (bash, javascript, python, json, yaml, ...)\n"
    "- Installation and CLI commands use bash blocks\n"
    "- NEVER use markdown as a code block language\n"
    "\n"
    "Output rules:\n"
    "- Write plain markdown; DO NOT wrap the whole README in a code block\n"
    "- Start directly with the level-1 title of the project\n"
    "- No extra explanation before or after the README\n"
)


def _project_context(project_info: ProjectInfo, project_name: str) -> str:
    lines = [
        "=== PROJECT INFORMATION ===",
        f"Project Name: {project_name}",
        f"Package Name: {project_info.name or 'N/A'}",
        f"Description: {project_info.description or 'No description in package.json - analyze from code'}",
        f"Version: {project_info.version or '1.0.0'}",
        f"License: {project_info.license or 'MIT'}",
    ]
    if project_info.repository:
        lines.append(f"Repository: {project_info.repository}")
    if project_info.homepage:
        lines.append(f"Homepage: {project_info.homepage}")
    if project_info.author:
        lines.append(f"Author: {project_info.author}")

    lines += [
        "",
        "=== PROJECT STRUCTURE ===",
        f"Entry Points: {', '.join(project_info.entry_points) or 'Not specified'}",
        f"Main File: {project_info.main or 'Not specified'}",
        f"Total Source Files: {len(project_info.source_files)}",
        f"Key Directories: {', '.join(project_info.directories) or 'None'}",
    ]
    if project_info.detected_features:
        lines.append(f"Detected Features/Technologies: {', '.join(project_info.detected_features)}")

    lines += [
        "",
        "=== DEPENDENCIES & TOOLS ===",
        f"Dependencies: {project_info.dependency_count} packages",
        f"Dev Dependencies: {len(project_info.dev_dependencies)} packages",
    ]
    if project_info.scripts:
        lines.append(f"Available Scripts: {', '.join(project_info.scripts)}")
    if project_info.env_vars:
        lines.append(f"Environment Variables: {', '.join(project_info.env_vars)}")

    lines += [
        "",
        "=== PROJECT CAPABILITIES ===",
        f"Has Tests: {'Yes' if project_info.has_tests else 'No'}",
        f"Has Docker: {'Yes' if project_info.has_docker else 'No'}",
        f"Has CI/CD: {'Yes (GitHub Actions)' if project_info.has_github_actions else 'No'}",
    ]
    if project_info.keywords:
        lines.append(f"Keywords: {', '.join(project_info.keywords)}")

    lines.append("")
    lines += determine_project_type(project_info)
    return "\n".join(lines)


def _source_context(project_info: ProjectInfo, max_source_chars: int) -> str:
    entries = list(project_info.source_code.items())[:MAX_PROMPT_SOURCE_FILES]
    if not entries:
        return ""
    parts = [
        "=== SOURCE CODE ANALYSIS ===",
        "The following source files were analyzed to understand the project:",
        "",
    ]
    for path, content in entries:
        parts.append(f"--- File: {path} ---\n{content[:max_source_chars]}\n")
    return "\n".join(parts)


def _requirements(project_name: str) -> str:
    return (
        "=== README REQUIREMENTS ===\n"
        "Create a README with ONLY the following sections (skip sections that don't apply):\n"
        f"1. Title & Description (REQUIRED): use the project name \"{project_name}\", badges on one line if relevant\n"
        "2. Features (REQUIRED if identifiable): 3-5 specific features taken from the code\n"
        "3. Installation (REQUIRED): prerequisites and the install command in a bash block\n"
        "4. Usage / Quick Start (REQUIRED): a minimal working example from the codebase\n"
        "5. Configuration (ONLY if env vars or config files exist)\n"
        "6. Scripts / Commands (ONLY if scripts exist)\n"
        "7. Testing (ONLY if tests are detected)\n"
        "8. Contributing (OPTIONAL, brief)\n"
        "9. License (REQUIRED)\n"
        "10. API Documentation / Deployment / Architecture (ONLY if relevant)\n"
    )


def build_readme_prompt(
    project_info: ProjectInfo,
    language: str = "en",
    max_source_chars: int = 2000
) -> Tuple[str, str]:
    """
    README 생성 프롬프트

    Returns:
        (system_prompt, user_prompt)
    """
    project_name = project_info.display_name or project_info.name or "Project"
    language_name = get_language_name(language)

    system_prompt = SYSTEM_ROLE + f"- Write the whole README in {language_name}\n"

    blocks = [
        f"Create a README.md for the project \"{project_name}\" in {language_name}.",
        _project_context(project_info, project_name),
    ]
    source = _source_context(project_info, max_source_chars)
    if source:
        blocks.append(source)
    blocks.append(f"Suggested Badges (only use if relevant):\n{generate_badges(project_info)}")
    blocks.append(_requirements(project_name))
    blocks.append(f"The output must start with: # {project_name}")

    return system_prompt, "\n\n".join(blocks)


# ============================================================
# 후처리
# ============================================================
BASH_FIRST_LINE = re.compile(
    r'^(\$ |(npm|yarn|pnpm|pip|pip3|git|curl|wget|brew|apt|apt-get|sudo|chmod|chown|mkdir|cd|export|echo|node|npx)\s)',
    re.IGNORECASE,
)


def guess_code_language(code: str) -> str:
    """언어 태그 없는 코드 블록의 언어 추정 (모르면 빈 문자열)"""
    stripped = code.strip()
    if not stripped:
        return ""
    first_line = stripped.split("\n", 1)[0].strip()

    if BASH_FIRST_LINE.match(first_line) or "install" in first_line or "run " in first_line:
        return "bash"
    if stripped.startswith(("{", "[")):
        return "json"
    if "def " in stripped or re.search(r'^from \S+ import ', stripped, re.MULTILINE):
        return "python"
    if re.search(r'\b(function|const|let|var|require\()', stripped) or stripped.startswith("import "):
        return "javascript"
    return ""


def _strip_wrapping_fence(lines: List[str]) -> List[str]:
    # 모델이 README 전체를 ```markdown ... ``` 로 감싼 경우
    while len(lines) >= 2 and lines[0].strip().startswith(FENCE) and lines[-1].strip() == FENCE:
        lines = lines[1:-1]
        while lines and not lines[0].strip():
            lines = lines[1:]
        while lines and not lines[-1].strip():
            lines = lines[:-1]
    return lines


def _is_toc_heading(line: str) -> bool:
    heading = match_heading(line)
    return bool(heading) and normalize_title(heading[1]) in TOC_TITLES


def _closing_fence_index(lines: List[str], start: int) -> Optional[int]:
    for j in range(start + 1, len(lines)):
        if lines[j].strip() == FENCE:
            return j
    return None


def _rewrite_body(lines: List[str]) -> List[str]:
    """목차 섹션 제거, 태그 없는 코드 블록 태깅, 헤딩 앞 빈 줄 보장"""
    out: List[str] = []
    skipping_toc = False
    i = 0
    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        if stripped.startswith(FENCE):
            close = _closing_fence_index(lines, i)
            if close is None:
                # 닫히지 않은 펜스는 그대로 둔다
                if not skipping_toc:
                    out.extend(lines[i:])
                break
            if not skipping_toc:
                opening = line
                if stripped == FENCE:
                    language = guess_code_language("\n".join(lines[i + 1:close]))
                    if language:
                        opening = line.replace(FENCE, FENCE + language, 1)
                out.append(opening)
                out.extend(lines[i + 1:close + 1])
            i = close + 1
            continue

        if match_heading(line):
            skipping_toc = _is_toc_heading(line)
            if skipping_toc:
                i += 1
                continue
            if out and out[-1].strip():
                out.append("")

        if not skipping_toc:
            out.append(line)
        i += 1
    return out


def post_process_readme(content: str) -> str:
    """
    모델 출력 정리

    - README 전체를 감싼 코드펜스 제거
    - Table of Contents 섹션 제거
    - 언어 태그 없는 코드 블록에 추정 태그 부여
    - 3줄 이상 연속 빈 줄 축소
    - 푸터 추가 (이미 있으면 생략)
    """
    lines = content.strip().replace("\r\n", "\n").split("\n")
    lines = _strip_wrapping_fence(lines)
    lines = _rewrite_body(lines)

    processed = "\n".join(lines)
    processed = re.sub(r'\n{3,}', '\n\n', processed)
    return append_footer(processed)


def strip_footer(content: str) -> str:
    """문서 끝의 푸터 제거 (병합 전에 사용)"""
    content = content.rstrip()
    while content.endswith(FOOTER):
        content = content[:-len(FOOTER)].rstrip()
    return content


def append_footer(content: str) -> str:
    """문서 끝에 푸터를 정확히 한 번 붙임"""
    body = strip_footer(content).strip()
    return f"{body}\n\n{FOOTER}\n" if body else f"{FOOTER}\n"
