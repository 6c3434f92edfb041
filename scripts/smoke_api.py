#!/usr/bin/env python3
"""Smoke test a running server: login, walk the booking wizard, read it back as admin."""

import sys
from datetime import date, timedelta

import httpx


BASE_URL = "http://127.0.0.1:8000"


def book(client: httpx.Client) -> str | None:
    print("=" * 60)
    print("Booking wizard")
    print("=" * 60)

    session_id = client.post("/booking").raise_for_status().json()["session_id"]
    print(f"Session: {session_id}")

    client.post(f"/booking/{session_id}/service", json={"service_id": "1"}).raise_for_status()
    day = (date.today() + timedelta(days=2)).isoformat()
    state = client.post(f"/booking/{session_id}/date", json={"date": day}).raise_for_status().json()

    open_slots = [slot for slot in state["time_slots"] if slot["available"]]
    if not open_slots:
        print(f"No open slots on {day}")
        return None
    print(f"Open slots on {day}: {', '.join(slot['time'] for slot in open_slots)}")

    client.post(f"/booking/{session_id}/time", json={"slot_id": open_slots[0]["id"]}).raise_for_status()
    done = client.post(
        f"/booking/{session_id}/details",
        json={"name": "Smoke Test", "phone": "555-000-0000", "email": "smoke@example.com"},
    ).raise_for_status().json()

    print(f"Confirmed: step={done['step_name']} appointment={done['appointment_id']}")
    return done["appointment_id"]


def check_admin(client: httpx.Client, appointment_id: str) -> None:
    print("\n" + "=" * 60)
    print("Admin")
    print("=" * 60)

    client.post(
        "/login", json={"username": "admin@example.com", "password": "admin123"}
    ).raise_for_status()
    metrics = client.get("/admin").raise_for_status().json()
    print(f"Dashboard: {metrics}")

    appointment = client.get(f"/admin/appointments/{appointment_id}").raise_for_status().json()
    print(f"Recorded: {appointment['client_name']} {appointment['service_name']} {appointment['date']} {appointment['time']}")
    client.post("/logout").raise_for_status()


def main():
    with httpx.Client(base_url=BASE_URL, timeout=10.0) as client:
        try:
            client.get("/health").raise_for_status()
        except httpx.HTTPError:
            print("Server is not running!")
            print("   Please start it with: uvicorn clinix.main:app --reload")
            sys.exit(1)

        try:
            appointment_id = book(client)
            if appointment_id:
                check_admin(client, appointment_id)
        except httpx.HTTPStatusError as e:
            print(f"HTTP Error: {e.response.status_code}")
            print(f"Response: {e.response.text}")
            sys.exit(1)


if __name__ == "__main__":
    main()
