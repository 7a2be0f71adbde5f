"""
README 업데이트 값 객체 모듈

파싱/분석/병합 단계에서 주고받는 불변 데이터 구조를 정의합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Section:
    """ATX 헤딩으로 구분된 섹션"""
    level: int  # 1 for #, 2 for ##, etc.
    title: str  # '#' 제거된 제목
    raw_title: str  # 원본 헤딩 라인
    content: str  # 다음 헤딩 전까지의 본문 (앞뒤 빈 줄 제거)
    start_line: int
    end_line: int


@dataclass(frozen=True)
class Badge:
    alt: str
    url: str


@dataclass(frozen=True)
class Link:
    text: str
    url: str


@dataclass(frozen=True)
class Metadata:
    """README 본문에서 추출한 메타데이터"""
    badges: Tuple[Badge, ...] = ()
    version: Optional[str] = None
    links: Tuple[Link, ...] = ()
    has_table_of_contents: bool = False


class HeaderStyle(str, Enum):
    HTML = "html"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class StructureFlags:
    """문서 구조 특성 (프롬프트 구성 시 참고용)"""
    total_lines: int = 0
    has_header: bool = False
    header_style: HeaderStyle = HeaderStyle.MARKDOWN
    has_badges: bool = False
    has_code_blocks: bool = False
    code_block_count: int = 0
    has_emojis: bool = False
    has_tables: bool = False


@dataclass(frozen=True)
class DocumentAnalysis:
    """
    기존 README 분석 결과

    exists=False 는 README 파일이 없다는 센티널이며 예외가 아닙니다.
    """
    exists: bool
    content: str = ""
    header: str = ""
    sections: Tuple[Section, ...] = ()
    metadata: Metadata = field(default_factory=Metadata)
    custom_sections: Tuple[Section, ...] = ()
    structure: StructureFlags = field(default_factory=StructureFlags)

    @classmethod
    def missing(cls) -> "DocumentAnalysis":
        """README가 존재하지 않을 때의 분석 결과"""
        return cls(exists=False)


class IssueKind(str, Enum):
    VERSION = "version"
    MISSING_SCRIPT = "missing-script"
    DEPENDENCY_COUNT = "dependency-count"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Issue:
    """README와 실제 프로젝트 메타데이터 간 불일치"""
    kind: IssueKind
    severity: Severity
    message: str
    current: Optional[str] = None
    expected: Optional[str] = None
    script: Optional[str] = None


@dataclass(frozen=True)
class SectionSuggestion:
    """검토가 필요한 섹션 추천"""
    name: str
    reason: str
    priority: Severity


@dataclass
class DiffSummary:
    """두 문서의 섹션 단위 비교 결과 (정규화된 제목 기준)"""
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)

    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.modified)


class UpdateMode(str, Enum):
    FULL = "full"
    SELECTIVE = "selective"
    VERSION = "version"


@dataclass(frozen=True)
class MergePolicy:
    """
    병합 정책

    - full: 커스텀 섹션만 보존하고 나머지는 새 내용으로 교체
    - selective: sections_to_update 에 있는 섹션만 새 내용으로 교체, 나머지는 기존 유지
    - version: 버전 토큰만 치환
    """
    mode: UpdateMode = UpdateMode.FULL
    sections_to_update: Tuple[str, ...] = ()
    preserve_custom_sections: bool = True
    preserve_header: bool = False
    match_level: bool = False  # True면 헤딩 레벨이 다르면 다른 섹션으로 취급
    version: Optional[str] = None

    @classmethod
    def full(cls, preserve_header: bool = False, match_level: bool = False) -> "MergePolicy":
        return cls(mode=UpdateMode.FULL, preserve_header=preserve_header, match_level=match_level)

    @classmethod
    def selective(
        cls,
        sections_to_update: List[str],
        preserve_header: bool = True,
        match_level: bool = False
    ) -> "MergePolicy":
        return cls(
            mode=UpdateMode.SELECTIVE,
            sections_to_update=tuple(sections_to_update),
            preserve_header=preserve_header,
            match_level=match_level,
        )

    @classmethod
    def version_only(cls, version: str) -> "MergePolicy":
        return cls(mode=UpdateMode.VERSION, version=version)


@dataclass(frozen=True)
class MergedSection:
    section: Section
    source: str  # "existing", "new", "custom"


@dataclass(frozen=True)
class MergeResult:
    """병합 결과와 섹션별 출처"""
    content: str
    header: str = ""
    sections: Tuple[MergedSection, ...] = ()

    def titles_from(self, source: str) -> List[str]:
        return [m.section.title for m in self.sections if m.source == source]
