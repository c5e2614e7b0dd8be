from fastapi.testclient import TestClient

from workout_log.api.dependencies.exercise import get_exercise_log_service
from workout_log.core.errors import StorageError

ENTRY_FORM = {
    "formDate": "2024-01-01",
    "formDescription": "Steady run",
    "formHours": "0",
    "formMinutes": "30",
    "formSeconds": "0",
    "formDistance": "5.0",
    "formPace": "6.0",
    "form1": "0",
    "form2": "0",
    "form3": "0",
    "form4": "0",
    "form5": "0",
    "formAvgHr": "140",
    "formMaxHr": "170",
    "formStrain": "10",
}


def _average(html: str, field: str, value: str) -> bool:
    return f'data-field="{field}">{value}</td>' in html


def test_entry_form_renders(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    assert 'name="formDistance"' in response.text
    assert 'action="/submit"' in response.text


def test_submit_redirects_to_logs(client: TestClient):
    response = client.post("/submit", data=ENTRY_FORM, follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/logs"


def test_single_entry_end_to_end(client: TestClient):
    response = client.post("/submit", data=ENTRY_FORM)
    assert response.status_code == 200

    html = client.get("/logs").text
    assert _average(html, "duration_avg", "00:30:00")
    assert _average(html, "distance_avg", "5.00")
    assert _average(html, "pace_avg", "6.00")
    assert _average(html, "avg_hr_avg", "140.00")
    assert _average(html, "max_hr_avg", "170.00")
    assert _average(html, "strain_avg", "10.00")
    assert _average(html, "zone3_avg", "0.00")
    assert "Steady run" in html
    assert html.count('class="entry-row"') == 1


def test_logs_without_entries_show_not_available(client: TestClient):
    html = client.get("/logs").text
    assert _average(html, "distance_avg", "N/A")
    assert _average(html, "duration_avg", "N/A")
    assert 'class="entry-row"' not in html


def test_delete_both_clears_logs_and_averages(client: TestClient):
    client.post("/submit", data=ENTRY_FORM)
    client.post("/submit", data={**ENTRY_FORM, "formDate": "2024-01-02"})

    response = client.post("/delete-both", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/"

    html = client.get("/logs").text
    assert 'class="entry-row"' not in html
    for field in ("duration_avg", "distance_avg", "pace_avg", "zone1_avg", "strain_avg"):
        assert _average(html, field, "N/A")


def test_unparseable_numbers_are_coerced(client: TestClient):
    response = client.post("/submit", data={**ENTRY_FORM, "formDistance": "abc", "formPace": ""})
    assert response.status_code == 200

    html = client.get("/logs").text
    assert _average(html, "distance_avg", "0.00")
    assert _average(html, "pace_avg", "0.00")


def test_averages_cover_all_entries(client: TestClient):
    client.post("/submit", data=ENTRY_FORM)
    client.post("/submit", data={**ENTRY_FORM, "formDistance": "10", "formMinutes": "50", "formStrain": "11"})

    html = client.get("/logs").text
    assert _average(html, "distance_avg", "7.50")
    assert _average(html, "duration_avg", "00:40:00")
    assert _average(html, "strain_avg", "10.50")
    assert html.count('class="entry-row"') == 2


def test_storage_failure_returns_opaque_error(client: TestClient):
    class _BrokenService:
        def build_log_view(self):
            raise StorageError("Error loading logs: connection refused")

    client.app.dependency_overrides[get_exercise_log_service] = lambda: _BrokenService()

    response = client.get("/logs")

    assert response.status_code == 500
    assert response.text == "Internal Server Error"
    assert "connection refused" not in response.text


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_out_of_range_duration_is_dropped(client: TestClient):
    response = client.post("/submit", data={**ENTRY_FORM, "formHours": "1e20"})
    assert response.status_code == 200

    html = client.get("/logs").text
    assert _average(html, "duration_avg", "00:00:00")
    assert _average(html, "distance_avg", "5.00")
