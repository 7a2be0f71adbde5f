"""
README 최신성 검사 모듈

기존 README 분석 결과를 실제 프로젝트 메타데이터와 비교하여
불일치 항목(Issue)과 검토가 필요한 섹션을 찾아냅니다.
검사 결과는 정보 제공용이며 자동으로 수정하지 않습니다.
"""

import re
from typing import List

from ..project.schemas import ProjectInfo
from .models import DocumentAnalysis, Issue, IssueKind, SectionSuggestion, Severity


# README에서 언급 여부를 확인할 주요 스크립트
IMPORTANT_SCRIPTS = ('test', 'build', 'start', 'dev')

DEPENDENCY_COUNT_PATTERN = re.compile(r'(\d+)\s+dependencies', re.IGNORECASE)


def _check_version(analysis: DocumentAnalysis, project_info: ProjectInfo) -> List[Issue]:
    readme_version = analysis.metadata.version
    project_version = project_info.version
    if not readme_version or not project_version or readme_version == project_version:
        return []
    return [Issue(
        kind=IssueKind.VERSION,
        severity=Severity.MEDIUM,
        current=readme_version,
        expected=project_version,
        message=f"Version in README ({readme_version}) doesn't match project version ({project_version})",
    )]


def _check_scripts(analysis: DocumentAnalysis, project_info: ProjectInfo) -> List[Issue]:
    issues = []
    lowered = analysis.content.lower()
    for script in IMPORTANT_SCRIPTS:
        if not project_info.scripts.get(script):
            continue
        if f"npm run {script}" in lowered or script in lowered:
            continue
        issues.append(Issue(
            kind=IssueKind.MISSING_SCRIPT,
            severity=Severity.LOW,
            script=script,
            message=f'Project has a "{script}" script but it is not mentioned in README',
        ))
    return issues


def _check_dependency_count(analysis: DocumentAnalysis, project_info: ProjectInfo) -> List[Issue]:
    m = DEPENDENCY_COUNT_PATTERN.search(analysis.content)
    if not m:
        return []
    mentioned = int(m.group(1))
    actual = project_info.dependency_count
    if mentioned == actual:
        return []
    return [Issue(
        kind=IssueKind.DEPENDENCY_COUNT,
        severity=Severity.LOW,
        current=str(mentioned),
        expected=str(actual),
        message=f"README mentions {mentioned} dependencies but project has {actual}",
    )]


def detect_issues(analysis: DocumentAnalysis, project_info: ProjectInfo) -> List[Issue]:
    """
    README 최신성 검사

    규칙 (각 규칙은 독립적으로 평가):
        - version: README 버전과 프로젝트 버전이 다르면 medium
        - missing-script: test/build/start/dev 스크립트가 README에 언급되지 않으면 low
        - dependency-count: "<N> dependencies" 문구의 N이 실제 의존성 수와 다르면 low
    """
    if not analysis.exists:
        return []

    issues: List[Issue] = []
    issues.extend(_check_version(analysis, project_info))
    issues.extend(_check_scripts(analysis, project_info))
    issues.extend(_check_dependency_count(analysis, project_info))
    return issues


def suggest_sections_to_review(analysis: DocumentAnalysis, project_info: ProjectInfo) -> List[SectionSuggestion]:
    """기존 섹션 제목을 기준으로 재생성을 검토할 섹션 추천"""
    if not analysis.exists:
        return []

    titles = [s.title.lower() for s in analysis.sections]

    def _has(keyword: str) -> bool:
        return any(keyword in t for t in titles)

    suggestions: List[SectionSuggestion] = []
    if _has('install'):
        suggestions.append(SectionSuggestion(
            'Installation', 'May need updates based on current dependencies', Severity.MEDIUM))
    if _has('feature'):
        suggestions.append(SectionSuggestion(
            'Features', 'Project code may have evolved with new features', Severity.HIGH))
    if _has('usage'):
        suggestions.append(SectionSuggestion(
            'Usage', 'Commands or API may have changed', Severity.HIGH))
    if _has('test') and project_info.scripts.get('test'):
        suggestions.append(SectionSuggestion(
            'Testing', 'Test command may have changed', Severity.LOW))
    if _has('config') and project_info.env_vars:
        suggestions.append(SectionSuggestion(
            'Configuration', 'Environment variables may have changed', Severity.MEDIUM))
    return suggestions
