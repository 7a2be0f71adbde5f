"""
Tests for ReadmeWorkflow (LangGraph) in mock mode and with a fake chat model
"""
import json

import pytest
from langchain_core.messages import HumanMessage, SystemMessage

from readmi.config import ReadmiSettings
from readmi.update import IssueKind, extract_sections
from readmi.workflow import ReadmeWorkflow, check_readme, readme_filename
from readmi.workflow.nodes import build_mock_readme
from readmi.workflow.prompts import FOOTER
from readmi.project import ProjectInfo


EXISTING_README = (
    "# my tool\n"
    "\n"
    "Old intro\n"
    "\n"
    "## Sponsors\n"
    "\n"
    "Thanks ACME\n"
    "\n"
    "## Installation\n"
    "\n"
    "old\n"
)


def _fake_workflow(fake_llm_factory, responses, **settings):
    llm = fake_llm_factory(responses)
    workflow = ReadmeWorkflow(ReadmiSettings(llm_max_retries=1, **settings), use_mock=False, llm=llm)
    return workflow, llm


class TestReadmeFilename:
    """Test README file naming per language."""

    def test_english(self):
        assert readme_filename("en") == "README.md"
        assert readme_filename("") == "README.md"

    def test_other_language(self):
        assert readme_filename("ko") == "README.ko.md"


class TestWorkflowInit:
    """Test workflow construction."""

    def test_requires_api_key_without_mock(self):
        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            ReadmeWorkflow(ReadmiSettings(openai_api_key=None), use_mock=False)

    def test_mock_mode_has_no_llm(self, mock_settings):
        workflow = ReadmeWorkflow(mock_settings)

        assert workflow.use_mock is True
        assert workflow.llm is None


class TestGenerate:
    """Test fresh README generation."""

    def test_mock_generation_creates_readme(self, project_dir, mock_settings):
        result = ReadmeWorkflow(mock_settings).process(str(project_dir))

        assert result["success"] is True
        assert result["action"] == "created"
        assert result["path"].endswith("README.md")
        assert result["content"].startswith("# my tool\n")
        assert (project_dir / "README.md").read_text(encoding="utf-8") == result["content"]
        assert result["issues"] == []

    def test_dry_run_writes_nothing(self, project_dir, mock_settings):
        result = ReadmeWorkflow(mock_settings).process(str(project_dir), dry_run=True)

        assert result["success"] is True
        assert result["action"] == "created"
        assert not (project_dir / "README.md").exists()

    def test_language_specific_file(self, project_dir, mock_settings):
        result = ReadmeWorkflow(mock_settings).process(str(project_dir), language="ko")

        assert result["path"].endswith("README.ko.md")
        assert (project_dir / "README.ko.md").exists()

    def test_fake_llm_output_is_post_processed(self, project_dir, fake_llm_factory):
        workflow, llm = _fake_workflow(fake_llm_factory, ["```markdown\n# Fake Tool\n\nHello\n```"])

        result = workflow.process(str(project_dir))

        assert result["success"] is True
        assert result["content"].startswith("# Fake Tool\n\nHello")
        assert "Made with" in result["content"]
        assert len(llm.calls) == 1
        system_message, human_message = llm.calls[0]
        assert isinstance(system_message, SystemMessage)
        assert isinstance(human_message, HumanMessage)
        assert "my tool" in human_message.content

    def test_list_content_response(self, project_dir, fake_llm_factory):
        workflow, _ = _fake_workflow(fake_llm_factory, [[{"type": "text", "text": "# Listy\n\nbody"}]])

        result = workflow.process(str(project_dir))

        assert result["content"].startswith("# Listy\n\nbody")

    def test_empty_response_is_an_error(self, project_dir, fake_llm_factory):
        workflow, _ = _fake_workflow(fake_llm_factory, ["   "])

        result = workflow.process(str(project_dir))

        assert result["success"] is False
        assert "Generated content is empty" in result["error"]
        assert not (project_dir / "README.md").exists()

    def test_model_failure_is_an_error(self, project_dir, fake_llm_factory):
        workflow, llm = _fake_workflow(fake_llm_factory, [RuntimeError("quota exceeded")])

        result = workflow.process(str(project_dir))

        assert result["success"] is False
        assert result["error"].startswith("README generator failed")
        assert "quota exceeded" in result["error"]
        assert len(llm.calls) == 1

    def test_missing_project_directory(self, tmp_path, mock_settings):
        result = ReadmeWorkflow(mock_settings).process(str(tmp_path / "nope"))

        assert result["success"] is False
        assert result["error"].startswith("Project loader failed")


class TestUpdate:
    """Test updating an existing README."""

    def test_full_update_preserves_custom_sections(self, project_dir, mock_settings):
        (project_dir / "README.md").write_text(EXISTING_README, encoding="utf-8")

        result = ReadmeWorkflow(mock_settings).process(str(project_dir), mode="full")

        assert result["success"] is True
        assert result["action"] == "updated"
        assert result["preserved_sections"] == ["Sponsors"]
        assert "## Sponsors\n\nThanks ACME" in result["content"]
        assert "## Installation\n\nold" not in result["content"]
        assert "📦 Installation" in result["diff"].modified
        assert [i.script for i in result["issues"] if i.kind == IssueKind.MISSING_SCRIPT] == ["test", "build"]

    def test_footer_stays_at_end_after_custom_sections(self, project_dir, mock_settings):
        (project_dir / "README.md").write_text(EXISTING_README + f"\n{FOOTER}\n", encoding="utf-8")

        result = ReadmeWorkflow(mock_settings).process(str(project_dir), mode="full")

        content = result["content"]
        assert content.count(FOOTER) == 1
        assert content.endswith(f"Thanks ACME\n\n{FOOTER}\n")

    def test_selective_update_has_single_footer(self, project_dir, mock_settings):
        existing = "# my tool\n\nOld intro\n\n## 📄 License\n\nMIT\n\n" + FOOTER + "\n"
        (project_dir / "README.md").write_text(existing, encoding="utf-8")

        result = ReadmeWorkflow(mock_settings).process(
            str(project_dir), mode="selective", sections_to_update=["Usage"]
        )

        assert result["content"].count(FOOTER) == 1
        assert result["content"].endswith(f"{FOOTER}\n")

    def test_update_without_readme_generates(self, project_dir, mock_settings):
        result = ReadmeWorkflow(mock_settings).process(str(project_dir), mode="full")

        assert result["success"] is True
        assert result["action"] == "created"

    def test_regenerating_same_content_is_unchanged(self, project_dir, mock_settings):
        workflow = ReadmeWorkflow(mock_settings)
        workflow.process(str(project_dir))

        result = workflow.process(str(project_dir), mode="full")

        assert result["success"] is True
        assert result["action"] == "unchanged"
        assert not result["diff"].has_changes()

    def test_selective_update(self, project_dir, mock_settings):
        (project_dir / "README.md").write_text(EXISTING_README, encoding="utf-8")

        result = ReadmeWorkflow(mock_settings).process(
            str(project_dir), mode="selective", sections_to_update=["Usage"]
        )

        sections = {s.title: s.content for s in extract_sections(result["content"])}
        assert result["success"] is True
        assert sections["Installation"] == "old"
        assert sections["Sponsors"] == "Thanks ACME"
        assert "🚀 Usage" in sections
        assert result["content"].startswith("# my tool\n\nOld intro")

    def test_selective_update_requires_sections(self, project_dir, mock_settings):
        (project_dir / "README.md").write_text(EXISTING_README, encoding="utf-8")

        result = ReadmeWorkflow(mock_settings).process(str(project_dir), mode="selective")

        assert result["success"] is False
        assert "No sections selected" in result["error"]

    def test_unknown_mode(self, project_dir, mock_settings):
        (project_dir / "README.md").write_text(EXISTING_README, encoding="utf-8")

        result = ReadmeWorkflow(mock_settings).process(str(project_dir), mode="partial")

        assert result["success"] is False
        assert result["error"].startswith("Update decider failed")

    def test_version_update_skips_model(self, project_dir, fake_llm_factory):
        (project_dir / "README.md").write_text("# X\n\nVersion: 1.0.0\n", encoding="utf-8")
        workflow, llm = _fake_workflow(fake_llm_factory, [RuntimeError("model must not be called")])

        result = workflow.process(str(project_dir), mode="version")

        assert result["success"] is True
        assert result["action"] == "updated"
        assert result["content"] == "# X\n\nVersion: 1.2.3\n"
        assert (project_dir / "README.md").read_text(encoding="utf-8") == "# X\n\nVersion: 1.2.3\n"
        assert llm.calls == []
        assert [i.kind for i in result["issues"]][0] == IssueKind.VERSION

    def test_version_update_is_idempotent(self, project_dir, mock_settings):
        (project_dir / "README.md").write_text("# X\n\nVersion: 1.0.0\n", encoding="utf-8")
        workflow = ReadmeWorkflow(mock_settings)
        workflow.process(str(project_dir), mode="version")

        result = workflow.process(str(project_dir), mode="version")

        assert result["action"] == "unchanged"

    def test_version_update_requires_project_version(self, tmp_path, mock_settings):
        (tmp_path / "package.json").write_text(json.dumps({"name": "noversion"}), encoding="utf-8")
        (tmp_path / "README.md").write_text("# X\n\nVersion: 1.0.0\n", encoding="utf-8")

        result = ReadmeWorkflow(mock_settings).process(str(tmp_path), mode="version")

        assert result["success"] is False
        assert "version" in result["error"]


class TestCheckReadme:
    """Test staleness check without generation."""

    def test_reports_issues(self, project_dir, sample_readme):
        (project_dir / "README.md").write_text(sample_readme, encoding="utf-8")

        report = check_readme(str(project_dir))

        assert report["success"] is True
        assert report["exists"] is True
        kinds = [i.kind for i in report["issues"]]
        assert kinds[0] == IssueKind.VERSION
        assert [s.name for s in report["suggestions"]] == ["Installation", "Features"]

    def test_missing_readme(self, project_dir):
        report = check_readme(str(project_dir))

        assert report["success"] is True
        assert report["exists"] is False
        assert report["issues"] == []


class TestMockReadme:
    """Test the mock README template."""

    def test_sections(self):
        content = build_mock_readme(ProjectInfo(name="pkg", version="0.1.0", scripts={"test": "jest"}))
        titles = [s.title for s in extract_sections(content)]

        assert titles == ["pkg", "📦 Installation", "🚀 Usage", "🛠️ Scripts", "📄 License"]
        assert "Version: 0.1.0" in content
