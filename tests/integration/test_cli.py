"""Integration tests for the command-line entry point."""

import pytest

from jobfit import main as cli
from jobfit.errors import ExportError


RESUME = "Prabhu\nSkills: JavaScript, HTML, CSS\n\nBuilt REST API demos with Docker."


def _write_inputs(tmp_path, job_text):
    resume = tmp_path / "resume.txt"
    job = tmp_path / "job.txt"
    resume.write_text(RESUME, encoding="utf-8")
    job.write_text(job_text, encoding="utf-8")
    return ["--resume", str(resume), "--job", str(job), "--output", str(tmp_path / "out")]


@pytest.mark.integration
def test_cli_writes_outputs_for_moderate_role(tmp_path, capsys):
    args = _write_inputs(tmp_path, "Company: Acme Corp\nBackend engineer with REST API and Docker.")
    assert cli.main(args) == 0

    out = tmp_path / "out"
    assert (out / "tailored_resume.tex").exists()
    text = (out / "tailored_resume.txt").read_text(encoding="utf-8")
    assert text.startswith("Prabhu\nAcme Corp - Tailored Resume")

    printed = capsys.readouterr().out
    assert "YELLOW - Moderate" in printed
    assert "Short Study Plan" in printed


@pytest.mark.integration
def test_cli_company_flag_overrides_extraction(tmp_path):
    args = _write_inputs(tmp_path, "Company: Acme Corp\nFresher welcome, basic Excel.")
    assert cli.main(args + ["--company", "Mine Ltd"]) == 0
    text = (tmp_path / "out" / "tailored_resume.txt").read_text(encoding="utf-8")
    assert "Mine Ltd - Tailored Resume" in text


@pytest.mark.integration
def test_cli_refuses_pdf_for_high_role(tmp_path, capsys, monkeypatch):
    async def unexpected_export(document, config=None):
        raise AssertionError("export must not run for heavy roles")

    monkeypatch.setattr(cli, "export_pdf", unexpected_export)
    args = _write_inputs(tmp_path, "Distributed systems, concurrency and algorithm design.")
    assert cli.main(args + ["--pdf"]) == 1
    assert "PDF export disabled" in capsys.readouterr().out


@pytest.mark.integration
def test_cli_reports_export_failure_once(tmp_path, capsys, monkeypatch):
    async def failing_export(document, config=None):
        raise ExportError("no compiler")

    monkeypatch.setattr(cli, "export_pdf", failing_export)
    args = _write_inputs(tmp_path, "Fresher welcome, basic Excel skills.")
    assert cli.main(args + ["--pdf"]) == 0

    captured = capsys.readouterr()
    assert captured.err.count("PDF export failed") == 1
    assert (tmp_path / "out" / "tailored_resume.tex").exists()


@pytest.mark.integration
def test_cli_writes_pdf_with_export_filename(tmp_path, monkeypatch):
    async def fake_export(document, config=None):
        return b"%PDF fake"

    monkeypatch.setattr(cli, "export_pdf", fake_export)
    args = _write_inputs(tmp_path, "Company: Acme Corp\nFresher welcome, basic Excel skills.")
    assert cli.main(args + ["--pdf"]) == 0
    assert (tmp_path / "out" / "Prabhu_Acme_Corp_resume.pdf").read_bytes() == b"%PDF fake"


@pytest.mark.integration
def test_cli_empty_job_description(tmp_path, capsys):
    args = _write_inputs(tmp_path, "   ")
    assert cli.main(args) == 1
    assert "Job description is empty" in capsys.readouterr().err


@pytest.mark.integration
@pytest.mark.parametrize("value", ["0", "-3", "many"])
def test_cli_rejects_invalid_top_n(tmp_path, capsys, value):
    args = _write_inputs(tmp_path, "Fresher welcome, basic Excel skills.")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(args + ["--top-n", value])
    assert excinfo.value.code == 2
    assert "--top-n" in capsys.readouterr().err


@pytest.mark.integration
def test_cli_top_n_limits_keywords(tmp_path, capsys):
    args = _write_inputs(tmp_path, "Fresher welcome, no coding required, basic Excel skills.")
    assert cli.main(args + ["--top-n", "2", "--verbose"]) == 0
    assert "  fresher, welcome\n" in capsys.readouterr().out
