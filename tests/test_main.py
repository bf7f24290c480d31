from fastapi.testclient import TestClient

from playcount.main import app

client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_analyze_and_status(example_lines):
    response = client.post("/analyze", json={"lines": example_lines})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "completed"
    assert body["result"]["target_date"] == "2016-08-10"
    assert body["result"]["histogram"] == [
        {"distinct_count": 1, "client_count": 2},
        {"distinct_count": 2, "client_count": 1},
    ]

    status = client.get("/analyze/status").json()
    assert status["last_run"]["histogram"] == body["result"]["histogram"]


def test_analyze_with_target_date(example_lines):
    response = client.post("/analyze", json={"lines": example_lines, "target_date": "2016-08-09"})
    assert response.json()["result"]["histogram"] == [{"distinct_count": 1, "client_count": 1}]


def test_analyze_rejects_bad_date(example_lines):
    response = client.post("/analyze", json={"lines": example_lines, "target_date": "banana"})
    assert response.status_code == 400
    assert "Supported formats" in response.json()["detail"]


def test_analyze_rejects_empty_input():
    assert client.post("/analyze", json={"lines": []}).status_code == 400


def test_analyze_rejects_empty_target_date(example_lines):
    response = client.post("/analyze", json={"lines": example_lines, "target_date": ""})
    assert response.status_code == 400
