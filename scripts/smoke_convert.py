"""Smoke script for the converter API and screen.

Sequence:
 1. List currencies.
 2. Convert one unit's worth of IDR to USD and 100000 IDR to JPY.
 3. Hit the three validation failures.
 4. Submit the HTML form once.
"""

import json

from fastapi.testclient import TestClient

from idr_converter.core.config import Settings
from idr_converter.main import create_app


def run():
    client = TestClient(create_app(settings_override=Settings(_env_file=None)))
    output = {}

    output["currencies"] = [c["label"] for c in client.get("/currencies").json()]
    output["usd"] = client.get("/convert", params={"amount": "16789", "currency": "USD"}).json()
    output["jpy"] = client.get("/convert", params={"amount": "100000", "currency": "JPY"}).json()
    output["errors"] = {
        raw or "<blank>": client.get("/convert", params={"amount": raw}).json()
        for raw in ("", "abc", "-5")
    }
    page = client.post("/ui", data={"amount": "100000", "currency": "JPY"})
    output["ui_has_result"] = "Hasil: 853.97 JPY" in page.text

    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    run()
