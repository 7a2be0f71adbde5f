"""
Tests for readme_analyzer module
"""
from readmi.update import analyze_readme_file, parse
from readmi.update.models import HeaderStyle


class TestParse:
    """Test README analysis."""

    def test_empty_readme(self):
        analysis = parse("")

        assert analysis.exists
        assert analysis.sections == ()
        assert analysis.metadata.badges == ()
        assert analysis.metadata.version is None
        assert analysis.metadata.links == ()
        assert analysis.metadata.has_table_of_contents is False
        assert analysis.custom_sections == ()

    def test_sample_readme(self, sample_readme):
        analysis = parse(sample_readme)

        assert analysis.content == sample_readme
        assert len(analysis.sections) == 6
        assert analysis.metadata.version == "1.0.0"
        assert [s.title for s in analysis.custom_sections] == ["My Tool", "Sponsors"]
        assert analysis.structure.header_style == HeaderStyle.HTML
        assert analysis.header.startswith("<div")

    def test_malformed_markdown_does_not_raise(self):
        analysis = parse("#no space\n```\nunclosed fence\n[broken](link\n![img(\n")

        assert analysis.sections == ()
        assert analysis.metadata.links == ()


class TestAnalyzeReadmeFile:
    """Test file-based analysis."""

    def test_missing_file(self, tmp_path):
        analysis = analyze_readme_file(tmp_path / "README.md")

        assert analysis.exists is False
        assert analysis.content == ""
        assert analysis.sections == ()

    def test_directory_is_treated_as_missing(self, tmp_path):
        assert analyze_readme_file(tmp_path).exists is False

    def test_existing_file(self, tmp_path, sample_readme):
        path = tmp_path / "README.md"
        path.write_text(sample_readme, encoding="utf-8")

        analysis = analyze_readme_file(str(path))

        assert analysis.exists
        assert [s.title for s in analysis.sections][0] == "My Tool"
