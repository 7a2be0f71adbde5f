"""
LangGraph 워크플로우 상태 정의

README 생성/업데이트 워크플로우의 상태를 관리합니다.
"""
from typing import TypedDict, List, Optional

from ..project.schemas import ProjectInfo
from ..update.models import DiffSummary, DocumentAnalysis, Issue, MergePolicy, MergeResult, SectionSuggestion


class ReadmeState(TypedDict, total=False):
    """
    LangGraph 워크플로우 상태

    워크플로우 단계:
    1. ProjectLoader: 프로젝트 스캔 + 기존 README 분석
    2. ReadmeAnalyzer: 최신성 검사 (issues / suggestions)
    3. UpdateDecider: 신규 생성 vs 업데이트, 병합 정책 결정
    4. ReadmeGenerator: LLM(또는 Mock)으로 생성 후 병합
    5. ReadmeSaver: 파일 저장 (dry_run 이면 건너뜀)
    """

    # ========== 입력 데이터 ==========
    project_root: str  # 프로젝트 루트 경로 (필수 입력)
    update: bool  # True: 기존 README 업데이트 요청
    mode: str  # "full", "selective", "version"
    sections_to_update: List[str]  # selective 모드에서 재생성할 섹션 제목
    language: str  # 언어 코드 (en, ko, ...)
    dry_run: bool  # True면 파일을 쓰지 않음
    preserve_header: Optional[bool]  # None이면 모드 기본값
    max_source_chars: int  # 프롬프트에 넣을 파일별 소스 최대 길이

    # ========== 로드된 데이터 ==========
    project_info: Optional[ProjectInfo]
    readme_path: Optional[str]  # 대상 README 경로
    existing_readme: Optional[DocumentAnalysis]  # exists=False 면 README 없음

    # ========== 분석 결과 ==========
    issues: List[Issue]
    suggestions: List[SectionSuggestion]

    # ========== 결정 결과 ==========
    should_update: bool  # True: 기존 README와 병합, False: 신규 생성
    merge_policy: Optional[MergePolicy]

    # ========== 생성 결과 ==========
    generated_content: Optional[str]  # 후처리된 모델 출력
    readme_content: Optional[str]  # 최종 README 본문
    merge_result: Optional[MergeResult]
    diff_summary: Optional[DiffSummary]

    # ========== 저장 결과 ==========
    action: Optional[str]  # "created", "updated", "unchanged"

    # ========== 상태 및 에러 ==========
    status: str  # "loading", "analyzing", "deciding", "generating", "saving", "completed", "error"
    error: Optional[str]  # 에러 메시지
