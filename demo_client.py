"""
demo_client.py: replay the demo page's requests from a terminal

Usage:
  python demo_client.py --base http://127.0.0.1:8000 --user tom --password 1234

Runs three requests against the protected endpoint:
  1. challenge:  no credentials               -> expect 401 + WWW-Authenticate: Basic
  2. preemptive: pre-computed Authorization   -> expect 200 {"userName": ...}
  3. reset:      user name with empty password -> expect 401 (how a browser forgets credentials)
"""
import argparse
import sys
from datetime import datetime, timezone
from typing import Dict, Optional

import httpx

from auth.utils import build_basic_authorization


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def _fetch(client: httpx.Client, path: str, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
    r = client.get(path, headers=headers)
    print(f"{_now_iso()}: {r.status_code} {r.reason_phrase}")
    challenge = r.headers.get("www-authenticate")
    if challenge:
        print(f"{_now_iso()}: WWW-Authenticate: {challenge}")
    if r.is_success:
        print(f"{_now_iso()}: {r.text}")
    return r


def run_challenge_demo(client: httpx.Client, path: str) -> bool:
    """No Authorization header: the server must challenge."""
    r = _fetch(client, path)
    return r.status_code == 401 and r.headers.get("www-authenticate") == "Basic"


def run_preemptive_demo(client: httpx.Client, path: str, user: str, password: str) -> bool:
    """Header computed up front: the server must answer without a challenge."""
    r = _fetch(client, path, {"Authorization": build_basic_authorization(user, password)})
    return r.status_code == 200 and r.json() == {"userName": user}


def run_reset_demo(client: httpx.Client, path: str, user: str) -> bool:
    """User name with an empty password, as sent for `user@host`: must be challenged."""
    r = _fetch(client, path, {"Authorization": build_basic_authorization(user, "")})
    return r.status_code == 401


def run_all(client: httpx.Client, path: str, user: str, password: str) -> int:
    """Run every demo in order and return the number that did not behave as expected."""
    failures = 0
    for name, demo in (
        ("challenge", lambda: run_challenge_demo(client, path)),
        ("preemptive", lambda: run_preemptive_demo(client, path, user, password)),
        ("reset", lambda: run_reset_demo(client, path, user)),
    ):
        print(f"--- {name}")
        if not demo():
            print(f"UNEXPECTED: {name} demo did not get the expected response")
            failures += 1
    return failures


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:8000")
    parser.add_argument("--path", default="/api/data")
    parser.add_argument("--user", default="tom")
    parser.add_argument("--password", default="1234")
    parser.add_argument("--timeout", type=float, default=10.0)
    args = parser.parse_args(argv)

    try:
        with httpx.Client(base_url=args.base, timeout=args.timeout) as client:
            failures = run_all(client, args.path, args.user, args.password)
    except httpx.HTTPError as e:
        print(f"{_now_iso()}: {e}")
        return 2
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
