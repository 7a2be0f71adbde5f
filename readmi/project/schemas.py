"""
프로젝트 정보 Pydantic 스키마 정의
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union


class ProjectInfo(BaseModel):
    """README 생성/검증에 쓰이는 프로젝트 메타데이터"""
    name: str = ""
    display_name: str = ""
    description: str = ""
    version: str = ""
    license: Optional[str] = None
    author: Optional[str] = None
    repository: Optional[str] = None
    homepage: Optional[str] = None
    keywords: List[str] = []
    main: Optional[str] = None
    bin: Dict[str, str] = {}
    engines: Dict[str, str] = {}

    scripts: Dict[str, str] = {}
    dependencies: Dict[str, str] = {}
    dev_dependencies: Dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    # 디렉토리 스캔 결과
    files: List[str] = []
    source_files: List[str] = []
    source_code: Dict[str, str] = {}
    env_vars: List[str] = []
    entry_points: List[str] = []
    directories: List[str] = []
    detected_features: List[str] = []
    has_tests: bool = False
    has_docker: bool = False
    has_github_actions: bool = False
    has_env_file: bool = False

    class Config:
        populate_by_name = True

    @property
    def dependency_count(self) -> int:
        return len(self.dependencies)

    @classmethod
    def from_package_json(cls, data: Dict[str, Any]) -> "ProjectInfo":
        """package.json 딕셔너리에서 필요한 필드만 추출"""
        return cls(
            name=data.get("name") or "",
            description=data.get("description") or "",
            version=data.get("version") or "",
            license=_as_text(data.get("license")),
            author=_as_text(data.get("author"), key="name"),
            repository=_as_text(data.get("repository"), key="url"),
            homepage=data.get("homepage"),
            keywords=[str(k) for k in data.get("keywords") or []],
            main=data.get("main"),
            bin=_normalize_bin(data.get("bin"), data.get("name") or ""),
            engines=dict(data.get("engines") or {}),
            scripts=dict(data.get("scripts") or {}),
            dependencies=dict(data.get("dependencies") or {}),
            dev_dependencies=dict(data.get("devDependencies") or {}),
        )


def _as_text(value: Union[str, Dict[str, Any], None], key: str = "type") -> Optional[str]:
    # "repository": {"type": "git", "url": "..."} 형태 지원
    if value is None:
        return None
    if isinstance(value, dict):
        text = value.get(key)
        return str(text) if text else None
    return str(value)


def _normalize_bin(value: Union[str, Dict[str, str], None], package_name: str) -> Dict[str, str]:
    # "bin": "cli.js" 는 패키지 이름을 명령어로 사용
    if not value:
        return {}
    if isinstance(value, str):
        command = package_name.split("/")[-1] or "cli"
        return {command: value}
    return {str(k): str(v) for k, v in value.items()}
