def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_metrics_exposes_extraction_counter(client, upstream):
    upstream.reply("not json at all")
    client.post("/scam-detection", json={"query": "Acme", "analysisType": "deep"})
    body = client.get("/metrics").text
    assert 'investours_extraction_total{mode="deep",outcome="fallback"}' in body
    assert "investours_requests_total" in body
