import os
import unittest
from types import SimpleNamespace
from unittest.mock import patch

# Keep API tests deterministic and fast by default.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("KEYWORD_SIMILARITY_BLEND", "0")

from fastapi import Request
from fastapi.testclient import TestClient

from ats_reviewer.core.rate_limit import analyzer_client_key
from ats_reviewer.main import app


class AnalyzeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.payload = {
            "resumeText": (
                "John Doe\n"
                "john@example.com | +1 555 222 1111 | https://github.com/johndoe\n"
                "Summary\n"
                "Backend developer building Python services.\n"
                "Experience\n"
                "- Built APIs for SaaS products and improved response time by 35%.\n"
                "Skills\n"
                "Python React SQL Docker AWS\n"
            ),
            "jdText": (
                "We need a Python backend engineer with SQL, Docker, and cloud experience. "
                "3+ years experience required."
            ),
        }

    def test_analyze_contract_shape(self):
        response = self.client.post("/v1/analyze", json=self.payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(set(body["scores"]), {"overall", "ats", "keyword_match", "impact", "clarity"})
        self.assertIn("python", body["matched_keywords"])
        self.assertIsInstance(body["missing_keywords"], list)
        self.assertEqual(body["matched_count"], len(body["matched_keywords"]))
        self.assertIn("Add an Education section.", body["flags"])
        self.assertEqual(body["fix_list"], [f"Fix: {flag}" for flag in body["flags"]])
        self.assertLessEqual(len(body["suggested_rewrites"]), 6)
        self.assertIn("JD terms", body["tailored_summary"])

    def test_redaction_flag(self):
        payload = dict(self.payload)
        payload["redactPII"] = True
        response = self.client.post("/v1/analyze", json=payload)
        self.assertEqual(response.status_code, 200)
        self.assertNotIn("github.com/johndoe", response.text)

    def test_missing_job_description(self):
        response = self.client.post("/v1/analyze", json={"resumeText": "Python developer", "jdText": "   "})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Provide both resume and job description text.")

    def test_huge_weights_are_accepted(self):
        payload = dict(self.payload)
        payload["weights"] = {"ats": 1e308, "keyword_match": 1e308, "impact": 0, "clarity": 0}
        response = self.client.post("/v1/analyze", json=payload)
        self.assertEqual(response.status_code, 200)
        self.assertLessEqual(response.json()["scores"]["overall"], 100)

    def test_negative_weight_is_rejected(self):
        payload = dict(self.payload)
        payload["weights"] = {"ats": -1}
        response = self.client.post("/v1/analyze", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_api_key_is_enforced_when_configured(self):
        with patch("ats_reviewer.core.security.settings", SimpleNamespace(api_key="secret")):
            denied = self.client.post("/v1/analyze", json=self.payload)
            allowed = self.client.post("/v1/analyze", json=self.payload, headers={"X-API-Key": "secret"})
        self.assertEqual(denied.status_code, 401)
        self.assertEqual(allowed.status_code, 200)

    def test_unexpected_failure_returns_500(self):
        with patch("ats_reviewer.api.v1.analyze.analyze", side_effect=RuntimeError("boom")):
            response = self.client.post("/v1/analyze", json=self.payload)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Internal error while analyzing the resume.")

    def test_default_weights(self):
        response = self.client.get("/v1/config/weights")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"ats": 0.3, "keyword_match": 0.35, "impact": 0.2, "clarity": 0.15},
        )

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})


class RateLimitKeyTests(unittest.TestCase):
    def _request(self, headers: list[tuple[bytes, bytes]]) -> Request:
        return Request({"type": "http", "headers": headers, "client": ("203.0.113.7", 5000)})

    def test_keys_by_api_key_when_present(self):
        key = analyzer_client_key(self._request([(b"x-api-key", b"secret")]))
        self.assertTrue(key.startswith("key:"))
        self.assertNotIn("secret", key)
        self.assertEqual(key, analyzer_client_key(self._request([(b"x-api-key", b"secret")])))

    def test_falls_back_to_client_address(self):
        self.assertEqual(analyzer_client_key(self._request([])), "ip:203.0.113.7")


if __name__ == "__main__":
    unittest.main()
