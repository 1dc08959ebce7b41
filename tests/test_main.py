"""Tests for the command line entry point."""

import pytest

import resume_customizer.main as cli
from resume_customizer.ai_tailor import ResumeCustomizer

from conftest import FakeExtractor, FakeGeminiClient


@pytest.fixture
def resume_pdf(tmp_path):
    path = tmp_path / "resume.pdf"
    path.write_bytes(b"%PDF-1.4 fake")
    return path


def install_fake_customizer(monkeypatch, responses):
    def factory(api_key, settings):
        return ResumeCustomizer(
            api_key="test-key",
            settings=settings,
            extractor=FakeExtractor(),
            client=FakeGeminiClient(responses),
        )

    monkeypatch.setattr(cli, "ResumeCustomizer", factory)


def test_cli_writes_all_exports(monkeypatch, tmp_path, resume_pdf, happy_responses, capsys):
    install_fake_customizer(monkeypatch, happy_responses)
    job_file = tmp_path / "job.txt"
    job_file.write_text("Build Java microservices.", encoding="utf-8")
    out_dir = tmp_path / "out"

    exit_code = cli.main([
        "--resume", str(resume_pdf),
        "--title", "Backend Engineer",
        "--description-file", str(job_file),
        "--skills", "Java",
        "-o", str(out_dir),
    ])

    assert exit_code == 0
    assert (out_dir / "customized_resume.txt").read_text(encoding="utf-8").startswith("# Jane Doe")
    assert (out_dir / "customized_resume.doc").read_text(encoding="utf-8").startswith("Jane Doe\n=")
    assert "window.print()" in (out_dir / "customized_resume.html").read_text(encoding="utf-8")
    assert "67%" in capsys.readouterr().out


def test_cli_reports_pipeline_errors(monkeypatch, tmp_path, resume_pdf, capsys):
    install_fake_customizer(monkeypatch, ["# Jane", "garbage", "- unused"])
    exit_code = cli.main(["-r", str(resume_pdf), "-o", str(tmp_path / "out")])

    assert exit_code == 1
    assert "Failed to extract keywords." in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_cli_missing_resume_exits(tmp_path):
    with pytest.raises(SystemExit):
        cli.main(["-r", str(tmp_path / "missing.pdf")])
