"""
readmi
LLM 기반 README 생성 및 기존 README 스마트 업데이트
"""

__version__ = "0.1.0"
