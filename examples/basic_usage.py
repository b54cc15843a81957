#!/usr/bin/env python3
"""
Basic Usage Example - Trade Copier Relay

This script walks through one copy cycle against an in-process relay:
- The Master submits an OPEN and later a CLOSE for the same ticket
- Two Slaves poll for pending signals
- Each Slave acknowledges what it executed, and only that Slave's view shrinks

Run: python examples/basic_usage.py
"""

import json
from typing import Any

from copier_app.api.app import create_app


def poll(client, slave_id: str) -> list[dict[str, Any]]:
    """Fetch pending signals for a Slave."""
    body = client.get(f"/signal/{slave_id}").get_json()
    print(f"📥 {slave_id} has {body['count']} pending signal(s)")
    return body["signals"]


def execute_all(client, slave_id: str, signals: list[dict[str, Any]]) -> None:
    """Pretend to execute each signal, then acknowledge it."""
    for signal in signals:
        print(f"   ⚙️  {slave_id} executes {signal['action']} {signal['symbol']} ticket={signal['ticket']}")
        client.post(f"/signal/{slave_id}/executed", json={"signal_id": signal["id"]})


def main() -> None:
    print("🚀 Trade Copier Relay - Basic Usage")
    print("=" * 60)

    client = create_app().test_client()

    open_signal = {
        "master_id": "M1",
        "ticket": 100,
        "action": "OPEN",
        "symbol": "EURUSD",
        "type": "BUY",
        "lot": 0.10,
        "open_price": 1.0845,
        "sl": 1.0800,
        "tp": 1.0950,
    }
    response = client.post("/signal", json=open_signal).get_json()
    print(f"📤 Master submitted OPEN: {json.dumps(response)}")

    signals = poll(client, "slaveA")
    execute_all(client, "slaveA", signals)
    poll(client, "slaveA")

    # slaveB was offline; it still gets the OPEN
    poll(client, "slaveB")

    response = client.post("/signal", json={"master_id": "M1", "ticket": 100, "action": "CLOSE"})
    print(f"📤 Master submitted CLOSE: {json.dumps(response.get_json())}")

    for slave_id in ("slaveA", "slaveB"):
        execute_all(client, slave_id, poll(client, slave_id))

    rejected = client.post("/signal", json={"master_id": "M1", "ticket": 101, "action": "OPEN"})
    print(f"🚫 OPEN without symbol -> {rejected.status_code} {json.dumps(rejected.get_json())}")

    print("\n✅ Every Slave executed each signal once")


if __name__ == "__main__":
    main()
