"""
프로젝트 분석 모듈
"""
from .schemas import ProjectInfo
from .project_analyzer import analyze_project, extract_project_name
from .badges import generate_badges, determine_project_type

__all__ = [
    "ProjectInfo",
    "analyze_project",
    "extract_project_name",
    "generate_badges",
    "determine_project_type",
]
