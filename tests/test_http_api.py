import unittest
from datetime import datetime

from fastapi.testclient import TestClient

from areacheck.api import http_api
from areacheck.config import SESSION_COOKIE_NAME
from areacheck.memory.session_history import SessionHistoryStore


class _ManualClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class _AlwaysInside:
    def is_inside(self, point):
        return True


class TestAreaCheckEndpoint(unittest.TestCase):
    def setUp(self):
        self.store = SessionHistoryStore()
        http_api.app.dependency_overrides[http_api.get_store] = lambda: self.store
        self.client = TestClient(http_api.app)

    def tearDown(self):
        http_api.app.dependency_overrides.clear()

    def _check(self, **params):
        return self.client.get("/areaCheck", params=params)

    def test_healthz(self):
        resp = self.client.get("/healthz")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})

    def test_success_returns_wrapped_history_and_sets_cookie(self):
        resp = self._check(pointX="1", pointY="-1", scale="2.1")
        self.assertEqual(resp.status_code, 200)
        self.assertIn(SESSION_COOKIE_NAME, resp.cookies)

        entries = resp.json()["userAreaData"]["areaDataList"]
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0]["point"], {"x": 0.5, "y": -0.5, "scale": 2.0})
        self.assertIsInstance(entries[0]["result"], bool)
        self.assertIsInstance(entries[0]["calculationTime"], int)
        datetime.fromisoformat(entries[0]["calculatedAt"].replace("Z", "+00:00"))

    def test_session_accumulates_across_requests(self):
        self._check(pointX="0", pointY="0", scale="1")
        self._check(pointX="0", pointY="0", scale="1")
        resp = self._check(pointX="-3", pointY="5", scale="3")

        entries = resp.json()["userAreaData"]["areaDataList"]
        self.assertEqual(len(entries), 3)
        self.assertEqual(entries[-1]["point"]["scale"], 3.0)

    def test_separate_clients_get_separate_sessions(self):
        self._check(pointX="0", pointY="0", scale="1")
        other = TestClient(http_api.app)
        resp = other.get("/areaCheck", params={"pointX": "1", "pointY": "1", "scale": "1"})
        self.assertEqual(len(resp.json()["userAreaData"]["areaDataList"]), 1)

    def test_out_of_range_x_is_unprocessable(self):
        resp = self._check(pointX="3.01", pointY="0", scale="1")
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["error"], "InvalidValue")
        self.assertEqual(resp.json()["param"], "pointX")
        self.assertNotIn(SESSION_COOKIE_NAME, resp.cookies)

    def test_scale_between_windows_is_unprocessable(self):
        resp = self._check(pointX="0", pointY="0", scale="1.25")
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["param"], "scale")

    def test_too_long_value_is_unprocessable(self):
        resp = self._check(pointX="0.000000001", pointY="0", scale="1")
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["param"], "pointX")

    def test_missing_scale_is_bad_request(self):
        resp = self._check(pointX="0", pointY="0")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "ParamNotFound")
        self.assertEqual(resp.json()["param"], "scale")

    def test_blank_scale_is_value_not_provided(self):
        resp = self.client.get("/areaCheck?pointX=0&pointY=0&scale=")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "ParamValueNotProvided")
        self.assertEqual(resp.json()["param"], "scale")

    def test_repeated_key_uses_first_value(self):
        resp = self.client.get("/areaCheck?pointX=1&pointX=9&pointY=0&scale=1")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["userAreaData"]["areaDataList"][0]["point"]["x"], 1.0)

    def test_failures_do_not_touch_existing_history(self):
        self._check(pointX="0", pointY="0", scale="1")
        session_id = self.client.cookies.get(SESSION_COOKIE_NAME)

        self._check(pointX="9", pointY="0", scale="1")
        self._check(pointX="0", pointY="0")
        self.assertEqual(len(self.store.get(session_id)), 1)

    def test_region_dependency_can_be_overridden(self):
        http_api.app.dependency_overrides[http_api.get_region] = lambda: _AlwaysInside()
        resp = self._check(pointX="-3", pointY="-5", scale="1")
        self.assertTrue(resp.json()["userAreaData"]["areaDataList"][0]["result"])

    def test_invalidate_session_drops_history(self):
        self._check(pointX="0", pointY="0", scale="1")
        self._check(pointX="0", pointY="0", scale="1")
        session_id = self.client.cookies.get(SESSION_COOKIE_NAME)

        resp = self.client.delete("/areaCheck/session")
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(self.store.get(session_id), ())

        resp = self._check(pointX="0", pointY="0", scale="1")
        self.assertEqual(len(resp.json()["userAreaData"]["areaDataList"]), 1)


class TestSessionExpiry(unittest.TestCase):
    def setUp(self):
        self.clock = _ManualClock()
        self.store = SessionHistoryStore(clock=self.clock)
        http_api.app.dependency_overrides[http_api.get_store] = lambda: self.store
        http_api.app.dependency_overrides[http_api.get_session_ttl] = lambda: 60.0

    def tearDown(self):
        http_api.app.dependency_overrides.clear()

    def test_cookieless_sessions_are_swept_once_idle(self):
        params = {"pointX": "0", "pointY": "0", "scale": "1"}
        for _ in range(5):
            TestClient(http_api.app).get("/areaCheck", params=params)
        self.assertEqual(len(self.store), 5)

        self.clock.now = 61.0
        TestClient(http_api.app).get("/areaCheck", params=params)
        self.assertEqual(len(self.store), 1)

    def test_idle_session_restarts_empty(self):
        client = TestClient(http_api.app)
        params = {"pointX": "0", "pointY": "0", "scale": "1"}
        client.get("/areaCheck", params=params)
        client.get("/areaCheck", params=params)

        self.clock.now = 30.0
        resp = client.get("/areaCheck", params=params)
        self.assertEqual(len(resp.json()["userAreaData"]["areaDataList"]), 3)

        self.clock.now = 100.0
        resp = client.get("/areaCheck", params=params)
        self.assertEqual(len(resp.json()["userAreaData"]["areaDataList"]), 1)


if __name__ == "__main__":
    unittest.main()
