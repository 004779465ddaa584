"""Tests for /api/watch."""


class TestWatch:
    def test_start_monitoring(self, client):
        res = client.post("/api/watch", json={"path": "X"})
        assert res.status_code == 200
        msg = res.json()["message"]
        assert "Started monitoring" in msg
        assert "X" in msg

    def test_list_after_watch(self, client):
        client.post("/api/watch", json={"path": "/b"})
        client.post("/api/watch", json={"path": "/a"})
        client.post("/api/watch", json={"path": "/a"})
        data = client.get("/api/watch").json()
        assert data == {"paths": ["/a", "/b"], "count": 2}

    def test_empty_list(self, client):
        assert client.get("/api/watch").json() == {"paths": [], "count": 0}

    def test_stop_monitoring(self, client):
        client.post("/api/watch", json={"path": "/a"})
        res = client.request("DELETE", "/api/watch", json={"path": "/a"})
        assert res.status_code == 200
        assert res.json()["message"] == "Stopped monitoring: /a"
        assert client.get("/api/watch").json()["count"] == 0

    def test_stop_unknown_path(self, client):
        res = client.request("DELETE", "/api/watch", json={"path": "/never"})
        assert res.json()["message"] == "Not monitoring: /never"
