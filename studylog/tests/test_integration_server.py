import os
import pytest
import requests
import logging
from datetime import date

BASE_URL = os.getenv("STUDYTRACKER_BASE_URL", "http://127.0.0.1:8000")
TOKEN = os.getenv("STUDYTRACKER_TEST_TOKEN", "token-alice")
OTHER_TOKEN = os.getenv("STUDYTRACKER_OTHER_TEST_TOKEN", "token-bob")
logger = logging.getLogger(__name__)


def auth(token=TOKEN):
    return {"Authorization": f"Bearer {token}"}


def post_log(title, minutes, day, token=TOKEN):
    """Helper for POST /api/study-logs"""
    payload = {"title": title, "minutes": minutes, "date": day}
    r = requests.post(f"{BASE_URL}/api/study-logs", json=payload, headers=auth(token))
    logger.info("POST /api/study-logs %s → status=%s", payload, r.status_code)
    return r


def delete_log(log_id, token=TOKEN):
    """Helper for DELETE /api/study-logs?id="""
    r = requests.delete(f"{BASE_URL}/api/study-logs", params={"id": log_id}, headers=auth(token))
    logger.info("DELETE /api/study-logs id=%s → status=%s", log_id, r.status_code)
    return r


@pytest.mark.integration
def test_health_live():
    r = requests.get(f"{BASE_URL}/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


@pytest.mark.integration
def test_log_round_trip_live():
    """POST then GET shows the log once; DELETE removes it"""
    created = post_log("live check", 25, date.today().isoformat())
    assert created.status_code == 200
    log_id = created.json()[0]["id"]

    listed = requests.get(f"{BASE_URL}/api/study-logs", headers=auth()).json()
    assert [log["id"] for log in listed].count(log_id) == 1

    other = requests.get(f"{BASE_URL}/api/study-logs", headers=auth(OTHER_TOKEN)).json()
    assert log_id not in [log["id"] for log in other]

    assert delete_log(log_id, OTHER_TOKEN).status_code == 404
    assert delete_log(log_id).status_code == 200
    assert delete_log(log_id).status_code == 404
    logger.info("✓ Passed: live round trip")


@pytest.mark.integration
def test_unauthorized_live():
    r = requests.get(f"{BASE_URL}/api/study-logs")
    assert r.status_code == 401
    assert r.json()["error"] == "Unauthorized"


@pytest.mark.integration
def test_milestones_and_weekly_live():
    m = requests.get(f"{BASE_URL}/api/milestones", headers=auth())
    assert m.status_code == 200
    assert set(m.json()) == {"achieved", "pending", "stats"}

    w = requests.get(f"{BASE_URL}/api/study-logs/weekly", headers=auth())
    assert w.status_code == 200
    assert len(w.json()["days"]) == 7
    logger.info("✓ Passed: milestones and weekly summary reachable")
