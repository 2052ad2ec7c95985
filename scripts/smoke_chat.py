"""
Manual end-to-end check against a running server (uvicorn earthy_ai.main:app).
Needs OPENAI_API_KEY on the server for the chat step to return 200.
  python scripts/smoke_chat.py
"""
import os
import sys

import requests

BASE = os.environ.get("EARTHY_BASE_URL", "http://127.0.0.1:8000")
TIMEOUT = 30


def main():
    # 1. Liveness
    r = requests.get(f"{BASE}/", timeout=TIMEOUT)
    assert r.status_code == 200, f"Liveness failed: {r.status_code}"
    print(f"OK GET / -> {r.text!r}")

    r = requests.get(f"{BASE}/health", timeout=TIMEOUT)
    assert r.status_code == 200
    health = r.json()
    print(f"OK GET /health -> {health}")

    # 2. Empty input is rejected before any provider call
    r = requests.post(f"{BASE}/chat", json={"input": "   ", "history": []}, timeout=TIMEOUT)
    assert r.status_code == 400, f"Empty input should be 400, got {r.status_code}"
    assert r.json()["history"] == []
    print("OK POST /chat (empty input) -> 400")

    # 3. Two real turns; history grows by exactly one assistant turn per call
    history = []
    for text in ("Hi, what do you do?", "What do you charge?"):
        history.append({"author": "user", "text": text})
        r = requests.post(f"{BASE}/chat", json={"input": text, "history": history[:-1]}, timeout=TIMEOUT)
        data = r.json()
        if r.status_code == 502:
            print("Chat returned 502: is OPENAI_API_KEY set on the server?")
            return 1
        assert r.status_code == 200, f"Chat failed: {r.status_code} {r.text}"
        assert data["reply"], "reply should never be empty"
        assert len(data["history"]) == len(history), "history should be sent + 1 assistant turn"
        assert data["history"][-1]["author"] == "ai"
        history.append(data["history"][-1])
        print(f"OK POST /chat -> {data['reply'][:80]}")

    # 4. Lead capture validation never reaches the email provider
    r = requests.post(
        f"{BASE}/api/lead",
        json={"business_name": "Acme Landscaping", "website": "acme.example", "email": "not-an-email"},
        timeout=TIMEOUT,
    )
    expected = 400 if health.get("lead_capture_configured") else 503
    assert r.status_code == expected, f"Lead validation: expected {expected}, got {r.status_code}"
    print(f"OK POST /api/lead (bad email) -> {r.status_code}")
    print("Chat and lead endpoints are working.")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except requests.exceptions.ConnectionError:
        print("Error: Cannot reach server. Start with: uvicorn earthy_ai.main:app --reload")
        sys.exit(1)
    except AssertionError as e:
        print(f"Fail: {e}")
        sys.exit(1)
