#!/usr/bin/env python3
"""Sends sample Alexa envelopes to a running skill server and prints the replies."""
import os, sys, json, requests
from typing import Dict, Any, List, Optional

API = os.getenv("SKILL_API", "http://localhost:8000/alexa")


def envelope(request_type: str, intent: Optional[str] = None, console: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"type": request_type, "requestId": "probe", "locale": "de-DE"}
    if intent:
        slots = {}
        if console:
            slots["TYPE_OF_CONSOLE"] = {
                "name": "TYPE_OF_CONSOLE",
                "value": console,
                "resolutions": {"resolutionsPerAuthority": [{
                    "status": {"code": "ER_SUCCESS_MATCH"},
                    "values": [{"value": {"name": console}}],
                }]},
            }
        body["intent"] = {"name": intent, "slots": slots}
    return {"version": "1.0", "request": body}


TESTS: List[Dict[str, Any]] = [
    {"desc": "launch", "env": envelope("LaunchRequest"), "must": "Willkommen"},
    {"desc": "help", "env": envelope("IntentRequest", "AMAZON.HelpIntent"), "must": "fragen"},
    {"desc": "this week switch", "env": envelope("IntentRequest", "ReleaseThisWeek", "switch"), "must": "switch"},
    {"desc": "next week pc", "env": envelope("IntentRequest", "ReleaseNextWeek", "pc"), "must": "pc"},
    {"desc": "previous week ps4", "env": envelope("IntentRequest", "ReleasePreviousWeek", "ps4"), "must": "ps4"},
    {"desc": "no console", "env": envelope("IntentRequest", "ReleaseThisWeek"), "must": "nicht finden"},
]


def main():
    all_ok = True
    for t in TESTS:
        r = requests.post(API, json=t["env"], timeout=60)
        try:
            body = r.json()
        except ValueError:
            print(f"[FAIL] {t['desc']}: non-json {r.text[:200]}")
            all_ok = False
            continue
        speech = (body.get("response") or {}).get("outputSpeech", {}).get("text", "")
        ok = r.status_code == 200 and t["must"] in speech
        all_ok &= ok
        print(f"[{'PASS' if ok else 'FAIL'}] {t['desc']} ({r.status_code})")
        print("  speech:", speech.replace("\n", " "))
        if not ok:
            print("  body:", json.dumps(body, ensure_ascii=False)[:500])
    return 0 if all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
