"""
Tests for the email validation API.
"""

import io

import pytest
from fastapi.testclient import TestClient
from openpyxl import load_workbook

from email_validation.api.app import create_app


@pytest.fixture
def client(test_settings):
    """Create a test client running the app lifespan."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


def upload(name: str, content: str, content_type: str = "text/csv"):
    return (name, io.BytesIO(content.encode("utf-8")), content_type)


@pytest.fixture
def files():
    """Multipart payload with two small CSV files."""
    return {
        "first_file": upload("first.csv", "email\na@x.com\nb@x.com\n"),
        "second_file": upload("second.csv", "email\nb@x.com\nc@x.com\n"),
    }


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Email Validation API"
    assert data["endpoints"]["validate"] == "/api/v1/validate-emails"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "work_dir_writable": True}


def test_validate_emails_returns_csv(client, files):
    """The report comes back as a CSV download."""
    response = client.post("/api/v1/validate-emails", files=files, data={"output_format": "csv"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "validation_result_" in response.headers["content-disposition"]
    assert response.headers["content-description"] == "File Transfer"

    lines = response.text.splitlines()
    assert lines[0] == "Email,Normalized Email,Source,Status,Valid,Reason"
    assert lines[1] == "b@x.com,b@x.com,Both,Matching,Yes,"


def test_validate_emails_defaults_to_csv(client, files):
    """Leaving out the format produces a CSV report."""
    response = client.post("/api/v1/validate-emails", files=files)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")


def test_validate_emails_returns_excel(client, files):
    """The excel format returns a workbook."""
    response = client.post("/api/v1/validate-emails", files=files, data={"output_format": "excel"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    workbook = load_workbook(io.BytesIO(response.content))
    assert workbook.sheetnames == ["Validation Results", "Summary"]


def test_compare_emails_json(client, files):
    """The JSON endpoint returns lists, summary and a working download link."""
    response = client.post("/api/v1/compare-emails", files=files)

    assert response.status_code == 200
    data = response.json()
    assert data["matching_emails"] == ["b@x.com"]
    assert data["missing_in_first_file"] == ["c@x.com"]
    assert data["missing_in_second_file"] == ["a@x.com"]
    assert data["summary"]["matching_count"] == 1
    assert data["summary"]["total_emails_first_file"] == 2
    assert data["output_file_url"] == f"/api/v1/download/{data['file_name']}"

    download = client.get(data["output_file_url"])
    assert download.status_code == 200
    assert download.text.startswith("Email,Normalized Email")


def test_missing_first_file(client):
    """A request without the first file is rejected."""
    response = client.post(
        "/api/v1/validate-emails",
        files={"second_file": upload("second.csv", "email\na@x.com\n")},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "First file is required"


def test_missing_second_file(client):
    """A request without the second file is rejected."""
    response = client.post(
        "/api/v1/validate-emails",
        files={"first_file": upload("first.csv", "email\na@x.com\n")},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Second file is required"


def test_invalid_output_format(client, files):
    """Unknown report formats are rejected."""
    response = client.post("/api/v1/validate-emails", files=files, data={"output_format": "pdf"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Output format must be 'csv' or 'excel'"


def test_invalid_file_extension(client):
    """Uploads other than CSV or Excel are rejected."""
    response = client.post(
        "/api/v1/validate-emails",
        files={
            "first_file": upload("first.txt", "email\na@x.com\n", "text/plain"),
            "second_file": upload("second.csv", "email\na@x.com\n"),
        },
    )
    assert response.status_code == 400


def test_malformed_upload_is_server_error(client):
    """A ragged CSV fails the pipeline with a 500."""
    response = client.post(
        "/api/v1/compare-emails",
        files={
            "first_file": upload("first.csv", "email,name\na@x.com\n"),
            "second_file": upload("second.csv", "email\na@x.com\n"),
        },
    )
    assert response.status_code == 500
    assert "wrong number of fields" in response.json()["detail"]


def test_download_missing_file(client):
    """Unknown report names return 404."""
    response = client.get("/api/v1/download/validation_result_19700101_000000.csv")
    assert response.status_code == 404


def test_download_rejects_hidden_names(client):
    """Names starting with a dot are refused."""
    response = client.get("/api/v1/download/.env")
    assert response.status_code == 400
