"""
Test configuration and fixtures
"""
import json

import pytest

from readmi.config import ReadmiSettings


ENV_KEYS = [
    "OPENAI_API_KEY",
    "README_MODEL",
    "README_TEMPERATURE",
    "README_LANGUAGE",
    "README_USE_MOCK",
    "README_LLM_MAX_RETRIES",
    "README_MAX_SOURCE_CHARS",
    "LOG_LEVEL",
]


class FakeResponse:
    def __init__(self, content):
        self.content = content


class FakeLLM:
    """Chat model stand-in that records calls and replays canned responses."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return FakeResponse(response)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove readmi environment variables (including ones loaded from .env during the test)."""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def mock_settings():
    """Settings for mock-mode workflow runs."""
    return ReadmiSettings(use_mock=True, llm_max_retries=1)


@pytest.fixture
def fake_llm_factory():
    return FakeLLM


@pytest.fixture
def sample_readme():
    """README with a title block, standard sections and one custom section."""
    return (
        "<div align=\"center\">\n"
        "  <img src=\"logo.png\">\n"
        "</div>\n"
        "\n"
        "# My Tool\n"
        "\n"
        "[![npm version](https://img.shields.io/badge/version-1.0.0-blue.svg)](https://www.npmjs.com/package/my-tool)\n"
        "\n"
        "Version: 1.0.0\n"
        "\n"
        "## Installation\n"
        "\n"
        "```bash\n"
        "npm install my-tool\n"
        "```\n"
        "\n"
        "## Features\n"
        "\n"
        "- Fast\n"
        "- Small\n"
        "\n"
        "## Sponsors\n"
        "\n"
        "Thanks to [ACME](https://acme.example.com) for support.\n"
        "\n"
        "### Details\n"
        "\n"
        "Nested details.\n"
        "\n"
        "## License\n"
        "\n"
        "MIT\n"
    )


@pytest.fixture
def package_json_data():
    return {
        "name": "@acme/my-tool",
        "version": "1.2.3",
        "description": "A small command line tool",
        "license": "MIT",
        "bin": {"my-tool": "bin/cli.js"},
        "scripts": {"test": "jest", "build": "tsc"},
        "dependencies": {"commander": "^11.0.0"},
        "devDependencies": {"jest": "^29.0.0"},
        "repository": {"type": "git", "url": "https://github.com/acme/my-tool.git"},
    }


@pytest.fixture
def project_dir(tmp_path, package_json_data):
    """Small Node.js project on disk (no README)."""
    root = tmp_path / "my-tool"
    root.mkdir()
    (root / "package.json").write_text(json.dumps(package_json_data), encoding="utf-8")

    (root / "bin").mkdir()
    (root / "bin" / "cli.js").write_text(
        "const program = require('commander');\n// CLI command entry\nprogram.parse();\n",
        encoding="utf-8",
    )
    (root / "src").mkdir()
    (root / "src" / "api.js").write_text("export function api() { return 1; }\n", encoding="utf-8")
    (root / "test").mkdir()
    (root / "test" / "cli.test.js").write_text("test('runs', () => {});\n", encoding="utf-8")
    (root / "node_modules" / "commander").mkdir(parents=True)
    (root / "node_modules" / "commander" / "index.js").write_text("module.exports = {};\n", encoding="utf-8")
    (root / ".env.example").write_text("API_KEY=\n# comment\nPORT=3000\n", encoding="utf-8")
    (root / "Dockerfile").write_text("FROM node:20\n", encoding="utf-8")
    return root
