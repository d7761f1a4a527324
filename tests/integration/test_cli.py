"""Integration tests for scripts/render_resume.py."""

import importlib.util
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "render_resume.py"

runner = CliRunner()


def load_cli():
    loader_spec = importlib.util.spec_from_file_location("render_resume", SCRIPT_PATH)
    module = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(module)
    return module


@pytest.fixture
def cli(tmp_path, monkeypatch):
    module = load_cli()
    monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
    monkeypatch.setattr(module, "RESULTS_PATH", tmp_path / "results")
    yield module
    # Sinks added during a run point at the runner's captured stdout
    logger.remove()


@pytest.fixture
def document(cli, tmp_path):
    path = tmp_path / "resume.yaml"
    result = runner.invoke(cli.app, ["init", "-d", str(path), "-t", "classic"])
    assert result.exit_code == 0, result.output
    return path


@pytest.mark.integration
def test_variants_command(cli):
    result = runner.invoke(cli.app, ["variants"])
    assert result.exit_code == 0
    assert "modern (default)" in result.output
    assert "classic" in result.output
    assert "minimal" in result.output


@pytest.mark.integration
def test_init_refuses_to_overwrite(cli, document):
    result = runner.invoke(cli.app, ["init", "-d", str(document)])
    assert result.exit_code == 1

    result = runner.invoke(cli.app, ["init", "-d", str(document), "--empty", "--force"])
    assert result.exit_code == 0
    assert "John" not in document.read_text()


@pytest.mark.integration
def test_export_markdown_uses_saved_variant(cli, document, tmp_path):
    out = tmp_path / "out"
    result = runner.invoke(cli.app, ["export", "-d", str(document), "-f", "md", "-o", str(out)])

    assert result.exit_code == 0, result.output
    markdown = (out / "John_Doe_Resume.md").read_text()
    assert "## WORK EXPERIENCE" in markdown
    assert any((tmp_path / "logs").iterdir())


@pytest.mark.integration
def test_export_unknown_format_fails(cli, document, tmp_path):
    result = runner.invoke(
        cli.app, ["export", "-d", str(document), "-f", "docx", "-o", str(tmp_path / "out")]
    )
    assert result.exit_code == 1


@pytest.mark.integration
def test_preview_writes_html(cli, document, tmp_path):
    output = tmp_path / "preview.html"
    result = runner.invoke(cli.app, ["preview", "-d", str(document), "-t", "minimal", "-o", str(output)])

    assert result.exit_code == 0, result.output
    html = output.read_text()
    assert "minimal-template" in html
    assert "John Doe" in html


@pytest.mark.integration
def test_check_command(cli, document):
    result = runner.invoke(cli.app, ["check", "-d", str(document)])
    assert result.exit_code == 0, result.output
    assert "Consistent across modern, classic, minimal" in result.output


@pytest.mark.integration
def test_blocks_command(cli, document):
    result = runner.invoke(cli.app, ["blocks", "-d", str(document), "-t", "unknown"])
    assert result.exit_code == 0
    assert "John_Doe_Resume (modern)" in result.output
    assert "section_title" in result.output
    assert "[70%]" in result.output


@pytest.mark.integration
def test_invalid_document_exits_with_error(cli, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("not_a_document: true\n")
    result = runner.invoke(cli.app, ["check", "-d", str(path)])
    assert result.exit_code == 1
