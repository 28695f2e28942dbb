"""Integration tests for the FastAPI routes."""

import pytest
from fastapi.testclient import TestClient

import web.app as web_app
from jobfit.errors import ExportError


RESUME = "Prabhu\nSkills: JavaScript, HTML, CSS\n\nBuilt REST API demos with Docker."
MODERATE_JD = "Company: Acme Corp\nWe need a backend engineer with REST API and Docker experience."
HIGH_JD = "Looking for a distributed systems engineer with deep algorithm and concurrency expertise."
LOW_JD = "Fresher welcome, no coding required, basic Excel skills."


@pytest.fixture
def client():
    return TestClient(web_app.app)


@pytest.mark.integration
def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.integration
def test_analyze(client):
    response = client.post("/api/analyze", json={"resume_text": RESUME, "job_description": MODERATE_JD})
    assert response.status_code == 200
    body = response.json()
    assert body["intensity"] == "moderate"
    assert body["auto_company"] == "Acme Corp"
    assert body["badge"] == "YELLOW - Moderate"
    assert isinstance(body["initial_score"], int)
    assert "backend" in body["keywords"]


@pytest.mark.integration
def test_analyze_blank_job_description(client):
    body = client.post("/api/analyze", json={"resume_text": RESUME, "job_description": "  "}).json()
    assert body["intensity"] is None
    assert body["initial_score"] is None
    assert body["keywords"] == []
    assert body["auto_company"] == ""


@pytest.mark.integration
def test_generate(client):
    response = client.post("/api/generate", json={
        "resume_text": RESUME,
        "job_description": MODERATE_JD,
        "company": "Edited Co",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["bullets"] == ["Built REST API demos with Docker."]
    assert body["company"] == "Edited Co"
    assert body["filename"] == "Prabhu_Edited_Co_resume.pdf"
    assert body["clipboard_text"] == "Built REST API demos with Docker."
    assert body["export_enabled"] is True
    assert body["study_plan"]


@pytest.mark.integration
def test_generate_high_role_disables_export(client):
    body = client.post("/api/generate", json={"resume_text": RESUME, "job_description": HIGH_JD}).json()
    assert body["intensity"] == "high"
    assert body["export_enabled"] is False


@pytest.mark.integration
def test_study_plan(client):
    body = client.post("/api/study-plan", json={"resume_text": RESUME, "job_description": MODERATE_JD}).json()
    assert body["available"] is True
    assert body["plan"][0] == "Learn Docker basics and run a container"

    body = client.post("/api/study-plan", json={"resume_text": RESUME, "job_description": LOW_JD}).json()
    assert body["available"] is False


@pytest.mark.integration
def test_export_pdf_refused_for_high_roles(client):
    response = client.post("/api/export/pdf", json={"resume_text": RESUME, "job_description": HIGH_JD})
    assert response.status_code == 403


@pytest.mark.integration
def test_export_pdf_success(client, monkeypatch):
    async def fake_export(document, config=None):
        return b"%PDF-1.4 fake"

    monkeypatch.setattr(web_app, "export_pdf", fake_export)
    response = client.post("/api/export/pdf", json={"resume_text": RESUME, "job_description": MODERATE_JD})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "Prabhu_Acme_Corp_resume.pdf" in response.headers["content-disposition"]
    assert response.content == b"%PDF-1.4 fake"


@pytest.mark.integration
def test_export_pdf_failure_is_single_notice(client, monkeypatch):
    async def failing_export(document, config=None):
        raise ExportError("pdflatex exploded")

    monkeypatch.setattr(web_app, "export_pdf", failing_export)
    response = client.post("/api/export/pdf", json={"resume_text": RESUME, "job_description": MODERATE_JD})
    assert response.status_code == 502
    assert response.json() == {"detail": "PDF export failed"}

    # Analysis is unaffected by the failed export
    body = client.post("/api/analyze", json={"resume_text": RESUME, "job_description": MODERATE_JD}).json()
    assert body["intensity"] == "moderate"


@pytest.mark.integration
def test_export_pdf_without_document(client):
    response = client.post("/api/export/pdf", json={"resume_text": RESUME, "job_description": ""})
    assert response.status_code == 204


@pytest.mark.integration
def test_export_tex_and_txt(client):
    payload = {"resume_text": RESUME, "job_description": LOW_JD}
    tex = client.post("/api/export/tex", json=payload)
    assert tex.status_code == 200
    assert tex.headers["content-type"].startswith("application/x-tex")
    assert r"\begin{document}" in tex.text

    txt = client.post("/api/export/txt", json=payload).json()
    assert txt["success"] is True
    assert txt["filename"].endswith("_resume.txt")
    assert "=== SUMMARY ===" in txt["content"]


@pytest.mark.integration
def test_export_tex_blank_job_description(client):
    response = client.post("/api/export/tex", json={"resume_text": RESUME, "job_description": ""})
    assert response.status_code == 400


@pytest.mark.integration
def test_serverless_entry_exposes_same_app():
    from api.index import app as serverless_app
    assert serverless_app is web_app.app
