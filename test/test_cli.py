"""
Tests for the readmi command line entry point
"""
from unittest.mock import patch

import pytest

from readmi.cli import build_parser, main


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("readmi.cli.setup_logging"):
        yield


class TestParser:
    """Test argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.project == "."
        assert args.update is False
        assert args.mode == "full"
        assert args.preserve_header is None
        assert args.language is None

    def test_update_options(self):
        args = build_parser().parse_args(
            ["proj", "-u", "--mode", "selective", "--sections", "Usage, Installation", "-l", "ko", "-n"]
        )

        assert args.project == "proj"
        assert args.update
        assert args.mode == "selective"
        assert args.sections == "Usage, Installation"
        assert args.language == "ko"
        assert args.dry_run

    def test_invalid_mode(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--mode", "partial"])


class TestMain:
    """Test end-to-end CLI runs in mock mode."""

    def test_generate(self, clean_env, project_dir, capsys):
        assert main(["--mock", str(project_dir)]) == 0

        assert (project_dir / "README.md").exists()
        assert "README created" in capsys.readouterr().err

    def test_dry_run_prints_content(self, clean_env, project_dir, capsys):
        assert main(["--mock", "-n", str(project_dir)]) == 0

        assert capsys.readouterr().out.startswith("# my tool")
        assert not (project_dir / "README.md").exists()

    def test_selective_update(self, clean_env, project_dir, sample_readme, capsys):
        (project_dir / "README.md").write_text(sample_readme, encoding="utf-8")

        code = main(["--mock", "-u", "--mode", "selective", "--sections", "Installation", str(project_dir)])

        assert code == 0
        content = (project_dir / "README.md").read_text(encoding="utf-8")
        assert "## Sponsors" in content
        assert "- Fast" in content
        assert content.startswith("<div align=\"center\">")
        assert "Preserved: Sponsors" in capsys.readouterr().err

    def test_selective_update_without_sections_fails(self, clean_env, project_dir, sample_readme, capsys):
        (project_dir / "README.md").write_text(sample_readme, encoding="utf-8")

        assert main(["--mock", "-u", "--mode", "selective", str(project_dir)]) == 1
        assert "No sections selected" in capsys.readouterr().err

    def test_missing_api_key(self, clean_env, project_dir, capsys):
        assert main([str(project_dir)]) == 1
        assert "OPENAI_API_KEY" in capsys.readouterr().err

    def test_check(self, clean_env, project_dir, sample_readme, capsys):
        (project_dir / "README.md").write_text(sample_readme, encoding="utf-8")

        assert main(["--check", str(project_dir)]) == 0

        err = capsys.readouterr().err
        assert "[medium] Version in README (1.0.0) doesn't match project version (1.2.3)" in err
        assert "Sections to review:" in err

    def test_check_without_readme(self, clean_env, project_dir, capsys):
        assert main(["--check", str(project_dir)]) == 1
        assert "No README found" in capsys.readouterr().err

    def test_flags_override_settings(self, clean_env, project_dir):
        with patch("readmi.cli.ReadmeWorkflow") as workflow_cls:
            workflow_cls.return_value.process.return_value = {"success": False, "error": "stop"}

            assert main(["--mock", "-l", "ko", str(project_dir)]) == 1

        settings = workflow_cls.call_args.args[0]
        assert settings.use_mock is True
        assert settings.language == "ko"
        assert workflow_cls.return_value.process.call_args.kwargs["language"] == "ko"
