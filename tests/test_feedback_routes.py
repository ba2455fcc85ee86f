"""
Tests for POST /api/feedback.
"""

import uuid

import pytest


class TestFeedbackRoutes:
    def test_submit_feedback(self, client, api_headers, sample_feedback, feedback_store):
        response = client.post("/api/feedback", json=sample_feedback, headers=api_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Feedback submitted successfully!"}
        assert len(feedback_store.items) == 1

    def test_client_id_is_replaced(self, client, api_headers, sample_feedback, feedback_store):
        response = client.post(
            "/api/feedback", json={**sample_feedback, "id": "chosen-by-client"}, headers=api_headers
        )

        assert response.status_code == 200
        (stored,) = feedback_store.items.values()
        assert stored["id"] != "chosen-by-client"
        uuid.UUID(stored["id"])

    def test_case_insensitive_properties(self, client, api_headers, feedback_store):
        response = client.post(
            "/api/feedback",
            json={"FeedbackArea": "Calendar", "FeedbackText": "Love it", "FeedbackType": "Praise"},
            headers=api_headers,
        )

        assert response.status_code == 200
        (stored,) = feedback_store.items.values()
        assert stored["feedbackArea"] == "Calendar"

    @pytest.mark.parametrize("missing", ["feedbackArea", "feedbackText", "feedbackType"])
    def test_missing_field(self, client, api_headers, sample_feedback, feedback_store, missing):
        payload = {k: v for k, v in sample_feedback.items() if k != missing}

        response = client.post("/api/feedback", json=payload, headers=api_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid feedback data."
        assert feedback_store.items == {}

    def test_malformed_json(self, client, api_headers):
        response = client.post(
            "/api/feedback",
            content=b"{",
            headers={**api_headers, "Content-Type": "application/json"},
        )
        assert response.status_code == 500

    def test_store_failure(self, client, api_headers, sample_feedback, feedback_store):
        feedback_store.fail_with = RuntimeError("throttled")

        response = client.post("/api/feedback", json=sample_feedback, headers=api_headers)

        assert response.status_code == 500
        assert "throttled" not in response.text

    def test_requires_api_key(self, client, sample_feedback):
        response = client.post(
            "/api/feedback", json=sample_feedback, headers={"x-functions-key": "nope"}
        )
        assert response.status_code == 401
