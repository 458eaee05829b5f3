from datetime import datetime


def test_ping(client):
    r = client.get("/ping")
    assert r.status_code == 200
    assert r.json() == {"pong": True}

def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] in {"ok", "degraded"}

def test_version(client):
    r = client.get("/version")
    assert r.status_code == 200
    assert "version" in r.json()

def test_rpc_healthcheck(client):
    r = client.get("/rpc/healthcheck")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    # ISO-8601, parseable back into a datetime
    assert isinstance(datetime.fromisoformat(body["timestamp"]), datetime)

def test_request_id_echoed(client):
    r = client.get("/ping", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"
    assert client.get("/ping").headers["X-Request-ID"]
