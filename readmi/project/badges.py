"""
배지/프로젝트 유형 추론 모듈

ProjectInfo 로부터 추천 배지 문자열과 프로젝트 유형 설명을 만듭니다.
"""

from typing import List

from .schemas import ProjectInfo


FRAMEWORK_HINTS = [
    ('react', '- This is a React application/component'),
    ('vue', '- This is a Vue.js application/component'),
    ('express', '- This is a Node.js backend/API service'),
    ('@nestjs/core', '- This is a Node.js backend/API service'),
    ('electron', '- This is an Electron desktop application'),
    ('react-native', '- This is a React Native mobile application'),
]

TESTING_TOOLS = [
    ('jest', 'Jest'),
    ('mocha', 'Mocha'),
    ('cypress', 'Cypress'),
    ('playwright', 'Playwright'),
]

# 확장자 -> 언어 (앞쪽 우선)
LANGUAGE_HINTS = [
    (('py',), 'Python'),
    (('go',), 'Go'),
    (('rs',), 'Rust'),
    (('java', 'kt'), 'Java/Kotlin'),
    (('rb',), 'Ruby'),
    (('php',), 'PHP'),
    (('ts', 'tsx'), 'TypeScript'),
    (('js', 'jsx'), 'JavaScript'),
]


def generate_badges(project_info: ProjectInfo) -> str:
    """추천 배지 (한 줄, 공백 구분)"""
    badges: List[str] = []
    name = project_info.name

    if name and not name.startswith('@'):
        badges.append(f"[![npm version](https://img.shields.io/npm/v/{name})](https://www.npmjs.com/package/{name})")

    if project_info.license:
        badges.append(
            f"[![License: {project_info.license}](https://img.shields.io/badge/License-{project_info.license}-blue.svg)](LICENSE)"
        )

    repo_url = project_info.repository or ''
    if 'github.com' in repo_url:
        repo_path = repo_url.split('github.com', 1)[1].lstrip(':/')
        if repo_path.endswith('.git'):
            repo_path = repo_path[:-4]
        badges.append(f"[![GitHub stars](https://img.shields.io/github/stars/{repo_path})](https://github.com/{repo_path})")

    node_engine = project_info.engines.get('node')
    if node_engine:
        badges.append(f"![Node](https://img.shields.io/badge/node-{node_engine.replace('>=', '%3E%3D')}-green.svg)")

    return ' '.join(badges) if badges else 'No badges suggested'


def determine_project_type(project_info: ProjectInfo) -> List[str]:
    """프롬프트에 넣을 프로젝트 유형 설명 라인"""
    lines: List[str] = []

    if project_info.bin:
        lines.append('- This is a command-line interface (CLI) tool')
    elif project_info.main:
        lines.append('- This is a library/package meant to be imported by other projects')

    for dependency, hint in FRAMEWORK_HINTS:
        if dependency in project_info.dependencies:
            lines.append(hint)
            break

    tools = [label for key, label in TESTING_TOOLS if key in project_info.dev_dependencies]
    if tools:
        lines.append(f"- Testing is done with: {', '.join(tools)}")

    if project_info.has_docker:
        lines.append('- This project has Docker support')
    if project_info.has_github_actions:
        lines.append('- This project uses GitHub Actions for CI/CD')

    extensions = {f.rsplit('.', 1)[-1] for f in project_info.files if '.' in f}
    for exts, language in LANGUAGE_HINTS:
        if extensions.intersection(exts):
            lines.append(f"- This project uses {language}")
            break

    if not lines:
        lines.append('- Project type could not be automatically determined')
        lines.append('- Generating a generic README structure')
    return lines
