import json
from datetime import datetime, timedelta, timezone

import pytest

from fakes import FakeSupabase
from investours.config import settings
from investours.core.search_log_reports import decode_result, period_start

NOW = datetime(2026, 3, 31, 15, 0, tzinfo=timezone.utc)


def _row(query, search_type, created, success=True, user_id="user-1", result=None):
    return {
        "id": query,
        "user_id": user_id,
        "query": query,
        "search_type": search_type,
        "success": success,
        "result": result,
        "created_at": created.isoformat(),
    }


ROWS = [
    _row("Acme Capital", "quick", NOW - timedelta(hours=1), result=json.dumps({"riskLevel": "danger"})),
    _row("Lagos Forex Club", "deep", NOW - timedelta(days=3), success=False, result="not-json"),
    _row("Naija Agro Fund", "quick", NOW - timedelta(days=20)),
    _row("Old Ponzi", "deep", NOW - timedelta(days=60), user_id="user-2"),
]


@pytest.mark.parametrize("period, expected", [
    ("today", datetime(2026, 3, 31, 0, 0, tzinfo=timezone.utc)),
    ("week", datetime(2026, 3, 24, 15, 0, tzinfo=timezone.utc)),
    ("month", datetime(2026, 2, 28, 15, 0, tzinfo=timezone.utc)),
    ("all", None),
])
def test_period_start(period, expected):
    assert period_start(period, NOW) == expected


def test_month_start_wraps_the_year():
    assert period_start("month", datetime(2026, 1, 15, tzinfo=timezone.utc)) == datetime(2025, 12, 15, tzinfo=timezone.utc)


def test_decode_result_leaves_row_untouched():
    row = {"result": '{"a": 1}'}
    assert decode_result(row)["result"] == {"a": 1}
    assert row["result"] == '{"a": 1}'


@pytest.fixture
def seed(app):
    from investours.api.dependencies import get_supabase

    def _seed(rows):
        db = FakeSupabase(rows=rows)
        app.dependency_overrides[get_supabase] = lambda: db
        return db
    return _seed


@pytest.fixture
def seeded(seed):
    return seed(ROWS)


def test_list_endpoint_decodes_results(client, seeded):
    r = client.get("/search-logs", params={"userId": "user-1", "searchType": "quick"})
    assert r.status_code == 200
    data = r.json()
    assert [row["query"] for row in data] == ["Acme Capital", "Naija Agro Fund"]
    assert data[0]["result"] == {"riskLevel": "danger"}


def test_list_endpoint_keeps_undecodable_result(client, seeded):
    data = client.get("/search-logs", params={"q": "forex"}).json()
    assert data[0]["result"] == "not-json"


def test_text_search_matches_query_or_type(client, seeded):
    assert len(client.get("/search-logs", params={"q": "DEEP"}).json()) == 2


def test_list_endpoint_rejects_unknown_period(client, seeded):
    r = client.get("/search-logs", params={"period": "decade"})
    assert r.status_code == 400


def test_old_match_is_found_behind_newer_rows(client, seed):
    now = datetime.now(timezone.utc)
    noise = [_row(f"noise {i}", "quick", now - timedelta(minutes=i)) for i in range(100)]
    seed(noise + [_row("Acme Ponzi", "deep", now - timedelta(days=2))])
    data = client.get("/search-logs", params={"q": "acme", "limit": 100}).json()
    assert [row["query"] for row in data] == ["Acme Ponzi"]


@pytest.mark.parametrize("period, expected", [
    ("week", ["recent"]),
    ("month", ["recent", "this month"]),
    ("all", ["recent", "this month", "last quarter"]),
])
def test_period_filter_applies_before_limit(client, seed, period, expected):
    now = datetime.now(timezone.utc)
    seed([
        _row("recent", "quick", now - timedelta(days=2)),
        _row("this month", "quick", now - timedelta(days=20)),
        _row("last quarter", "quick", now - timedelta(days=60)),
    ])
    data = client.get("/search-logs", params={"period": period}).json()
    assert [row["query"] for row in data] == expected


def test_stats_endpoint(client, seeded):
    assert client.get("/search-logs/stats").json() == {"total": 4, "quick": 2, "deep": 2, "successful": 3}
    assert client.get("/search-logs/stats", params={"userId": "user-2"}).json() == {
        "total": 1, "quick": 0, "deep": 1, "successful": 1
    }


def test_stats_count_every_row(client, seed):
    now = datetime.now(timezone.utc)
    seed([_row(f"q{i}", "quick" if i % 2 else "deep", now) for i in range(10001)])
    assert client.get("/search-logs/stats").json() == {"total": 10001, "quick": 5000, "deep": 5001, "successful": 10001}


def test_stats_without_datastore_is_empty(client):
    assert client.get("/search-logs/stats").json() == {"total": 0, "quick": 0, "deep": 0, "successful": 0}


def test_reports_open_when_no_key_configured(client, seeded, monkeypatch):
    monkeypatch.setattr(settings, "SEARCH_LOGS_API_KEY", "")
    assert client.get("/search-logs/stats").status_code == 200


@pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer wrong"}])
def test_reports_key_required_when_configured(client, seeded, monkeypatch, headers):
    monkeypatch.setattr(settings, "SEARCH_LOGS_API_KEY", "reports-key")
    r = client.get("/search-logs", headers=headers)
    assert r.status_code == 401
    assert r.json() == {"error": "Unauthorized"}


def test_reports_key_accepted(client, seeded, monkeypatch):
    monkeypatch.setattr(settings, "SEARCH_LOGS_API_KEY", "reports-key")
    r = client.get("/search-logs/stats", headers={"Authorization": "Bearer reports-key"})
    assert r.status_code == 200
    assert r.json()["total"] == 4
