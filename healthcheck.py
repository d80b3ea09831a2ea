#!/usr/bin/env python3
# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""
Health Check Script for the Archive Backend

Usage:
    python healthcheck.py                    # Check localhost:3000
    python healthcheck.py http://example.com # Check custom URL
"""

import sys
import requests
from datetime import datetime

STATUS_EMOJIS = {
    "healthy": "✅",
    "degraded": "⚠️",
    "unhealthy": "❌"
}

def run_healthcheck(base_url="http://127.0.0.1:3000"):
    """Query /api/health and print a report. Returns a process exit code."""

    print(f"🏥 Running Archive Backend Health Check")
    print(f"📍 Target: {base_url}")
    print(f"⏰ Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 60)

    try:
        response = requests.get(f"{base_url}/api/health", timeout=10)
    except requests.exceptions.ConnectionError:
        print(f"❌ Connection Error: Unable to connect to {base_url}")
        return 4
    except requests.exceptions.Timeout:
        print(f"❌ Timeout Error: Request to {base_url} timed out")
        return 5
    except requests.exceptions.RequestException as e:
        print(f"❌ Request Error: {e}")
        return 6

    print(f"📡 HTTP Status: {response.status_code}")
    try:
        health_data = response.json()
    except ValueError:
        print("❌ Invalid JSON response:")
        print(response.text[:500])
        return 3

    status = health_data.get("status", "unknown")
    print(f"{STATUS_EMOJIS.get(status, '❓')} Overall Status: {status.upper()}")
    print(f"🔢 Version: {health_data.get('version', 'unknown')}")
    print(f"🌍 Environment: {health_data.get('environment', 'unknown')}")

    for check_name, check_data in health_data.get("checks", {}).items():
        check_status = check_data.get("status", "unknown")
        print(f"{STATUS_EMOJIS.get(check_status, '❓')} {check_name}: {check_status}")
        for key, value in (check_data.get("details") or {}).items():
            print(f"   └─ {key}: {value}")
        if "message" in check_data:
            print(f"   └─ {check_data['message']}")

    print("=" * 60)
    if status == "healthy" and response.status_code == 200:
        print("🎉 All systems operational!")
        return 0
    print("❌ System experiencing issues")
    return 1

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        return run_healthcheck()

    base_url = argv[0].rstrip("/")
    if not base_url.startswith(("http://", "https://")):
        base_url = f"http://{base_url}"
    return run_healthcheck(base_url)

if __name__ == "__main__":
    sys.exit(main())
