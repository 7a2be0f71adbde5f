"""
프로젝트 분석 모듈

프로젝트 디렉토리를 스캔하여 README 프롬프트와 최신성 검사에 필요한
ProjectInfo 를 만듭니다.
"""

import json
import os
import re
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..logging_config import get_logger
from .schemas import ProjectInfo

logger = get_logger("project_analyzer")


IGNORE_DIRS = {'node_modules', '.git', 'dist', 'build', '.next', 'coverage', '.vscode', '.idea', '__pycache__', '.venv', 'venv'}
IGNORE_FILES = {'.DS_Store', 'package-lock.json', 'yarn.lock', 'pnpm-lock.yaml'}

SOURCE_EXTENSIONS = ('.js', '.ts', '.jsx', '.tsx', '.py', '.go', '.rs', '.java', '.rb', '.php', '.cpp', '.c', '.cs')

KEY_FILES = [
    'index.js', 'index.ts', 'app.js', 'app.ts', 'main.js', 'main.ts',
    'src/index.js', 'src/index.ts', 'src/app.js', 'src/app.ts',
]

MAX_KEY_FILES = 5
MAX_SOURCE_SNIPPETS = 10
MAX_FEATURE_SCAN_FILES = 15
MAX_DIRECTORIES = 10
DEFAULT_MAX_SOURCE_CHARS = 5000

# 키워드 -> 기능 이름
FEATURE_KEYWORDS = [
    (('API', 'api'), 'API'),
    (('CLI', 'command'), 'CLI'),
    (('database', 'db'), 'Database'),
    (('authentication', 'auth'), 'Authentication'),
    (('middleware',), 'Middleware'),
    (('router', 'route'), 'Routing'),
    (('component',), 'Components'),
    (('hook',), 'Hooks'),
    (('util', 'helper'), 'Utilities'),
]


def get_all_files(root: Path) -> List[Path]:
    """무시 대상 디렉토리/파일을 제외한 전체 파일 목록 (정렬됨)"""
    collected: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in IGNORE_DIRS and not d.startswith('.'))
        for filename in sorted(filenames):
            if filename in IGNORE_FILES:
                continue
            collected.append(Path(dirpath) / filename)
    return collected


def read_source_file(path: Path, max_chars: int = DEFAULT_MAX_SOURCE_CHARS) -> Optional[str]:
    try:
        return path.read_text(encoding='utf-8', errors='ignore')[:max_chars]
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return None


def extract_project_name(root: Path, package_name: str = '') -> str:
    """표시용 프로젝트 이름 (@scope/ 제거, -/_ 를 공백으로)"""
    if package_name:
        return re.sub(r'[-_]', ' ', re.sub(r'^@[^/]+/', '', package_name))
    if root.name:
        return re.sub(r'[-_]', ' ', root.name)
    return 'Project'


def extract_features_from_code(root: Path, source_files: List[str]) -> List[str]:
    features: List[str] = []
    for relative in source_files[:MAX_FEATURE_SCAN_FILES]:
        content = read_source_file(root / relative)
        if not content:
            continue
        for keywords, feature in FEATURE_KEYWORDS:
            if feature not in features and any(k in content for k in keywords):
                features.append(feature)
    return features


def read_env_vars(root: Path) -> List[str]:
    """.env.example (없으면 .env) 에서 변수 이름만 추출"""
    for name in ('.env.example', '.env'):
        path = root / name
        if not path.is_file():
            continue
        names = []
        for line in path.read_text(encoding='utf-8', errors='ignore').split('\n'):
            line = line.strip()
            if line and not line.startswith('#') and '=' in line:
                names.append(line.split('=', 1)[0].strip())
        return names
    return []


def load_package_json(root: Path) -> Dict:
    path = root / 'package.json'
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable package.json: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def _is_test_path(relative: str) -> bool:
    lowered = relative.lower()
    return any(marker in lowered for marker in ('test', 'spec', '__tests__'))


def analyze_project(root: Union[str, Path], max_source_chars: int = 2000) -> ProjectInfo:
    """
    프로젝트 디렉토리 분석

    Args:
        root: 프로젝트 루트
        max_source_chars: 프롬프트에 포함할 파일별 소스 최대 길이

    Returns:
        ProjectInfo (package.json 이 없으면 디렉토리 스캔 결과만 채워짐)
    """
    root = Path(root).resolve()
    package_json = load_package_json(root)
    info = ProjectInfo.from_package_json(package_json)
    info.display_name = extract_project_name(root, info.name)

    all_files = get_all_files(root)
    relative_files = [p.relative_to(root).as_posix() for p in all_files]
    info.files = relative_files

    info.source_files = [
        f for f in relative_files
        if f.endswith(SOURCE_EXTENSIONS) and not _is_test_path(f)
    ]

    # 주요 파일 + 소스 파일 일부를 프롬프트용으로 수집
    key_files = [info.main] + list(info.bin.values()) + KEY_FILES
    source_code: Dict[str, str] = {}
    for key_file in [k for k in key_files if k][:MAX_KEY_FILES]:
        content = read_source_file(root / key_file, max_source_chars)
        if content:
            source_code[key_file] = content
    for relative in info.source_files[:MAX_SOURCE_SNIPPETS]:
        if relative in source_code:
            continue
        content = read_source_file(root / relative, max_source_chars)
        if content:
            source_code[relative] = content
    info.source_code = source_code

    info.detected_features = extract_features_from_code(root, info.source_files)
    info.entry_points = [e for e in [info.main] + list(info.bin.values()) if e]

    info.has_tests = any(_is_test_path(f) for f in relative_files)
    info.has_docker = any(
        f.endswith(('Dockerfile', 'docker-compose.yml', 'docker-compose.yaml'))
        for f in relative_files
    )
    workflows = root / '.github' / 'workflows'
    info.has_github_actions = workflows.is_dir() and any(workflows.iterdir())
    info.has_env_file = (root / '.env').is_file() or (root / '.env.example').is_file()
    info.env_vars = read_env_vars(root)

    directories: List[str] = []
    for f in relative_files:
        parts = f.split('/')
        if len(parts) > 1 and parts[0] not in directories:
            directories.append(parts[0])
    info.directories = directories[:MAX_DIRECTORIES]

    logger.info(
        f"Analyzed project {info.display_name}: {len(relative_files)} files, "
        f"{len(info.source_files)} source files"
    )
    return info
