#!/usr/bin/env python3
"""
Post-Deployment Health Check Script

This script validates that the deployed site is healthy and functional.
It performs critical checks on key pages, public API endpoints, database
connectivity and the admin gate.

Usage:
    python scripts/health_check.py --url <DEPLOYMENT_URL> --environment <staging|production>

Checks Performed:
    1. Home page (/) returns 200 OK
    2. API health endpoint (/api/health) returns 200 OK and database is connected
    3. Public listings (/api/blog-posts, /api/olympiad-dates) return 200 OK
    4. Admin-only endpoint (/api/contact-submissions) rejects anonymous calls with 401

Exit Codes:
    0: All health checks passed
    1: One or more health checks failed
"""

import argparse
import sys
import time
import requests
from typing import Dict, Tuple


def check_endpoint(url: str, endpoint: str, timeout: int = 10, expected_status: int = 200) -> Tuple[bool, str]:
    """
    Checks if an endpoint returns the expected HTTP status code.

    Args:
        url: Base deployment URL
        endpoint: Endpoint path to check
        timeout: Request timeout in seconds
        expected_status: Expected HTTP status code

    Returns:
        Tuple[bool, str]: (success, message)
    """
    full_url = f"{url.rstrip('/')}{endpoint}"

    try:
        response = requests.get(full_url, timeout=timeout, allow_redirects=False)

        if response.status_code == expected_status:
            return True, f"✓ {endpoint} returned {response.status_code}"
        else:
            return False, f"✗ {endpoint} returned {response.status_code} (expected {expected_status})"

    except requests.exceptions.Timeout:
        return False, f"✗ {endpoint} timed out after {timeout} seconds"
    except requests.exceptions.ConnectionError:
        return False, f"✗ {endpoint} connection failed"
    except requests.exceptions.RequestException as e:
        return False, f"✗ {endpoint} error: {str(e)}"


def check_health_endpoint(url: str, timeout: int = 10) -> Tuple[bool, str]:
    """
    Checks the /api/health endpoint and verifies database connectivity.

    Returns:
        Tuple[bool, str]: (success, message)
    """
    full_url = f"{url.rstrip('/')}/api/health"

    try:
        response = requests.get(full_url, timeout=timeout)

        if response.status_code != 200:
            return False, f"✗ /api/health returned {response.status_code}"

        try:
            data = response.json()
        except ValueError:
            return False, "✗ /api/health returned invalid JSON"

        database = data.get('database', {})
        db_status = database.get('status', 'unknown')
        backend = database.get('backend', 'unknown')

        if db_status == 'connected':
            return True, f"✓ /api/health returned 200, {backend} database connected"
        else:
            return False, f"✗ /api/health database status: {db_status}"

    except requests.exceptions.Timeout:
        return False, f"✗ /api/health timed out after {timeout} seconds"
    except requests.exceptions.ConnectionError:
        return False, "✗ /api/health connection failed"
    except requests.exceptions.RequestException as e:
        return False, f"✗ /api/health error: {str(e)}"


def run_health_checks(url: str, environment: str) -> Dict[str, Tuple[bool, str]]:
    """
    Runs all health checks and returns results keyed by check name.
    """
    print(f"\n{'='*60}")
    print(f"Post-Deployment Health Checks - {environment.upper()}")
    print(f"{'='*60}\n")
    print(f"Target URL: {url}\n")

    results = {}

    print("Check 1: Home page (/)...")
    success, message = check_endpoint(url, "/", timeout=15)
    results["home_page"] = (success, message)
    print(f"  {message}\n")

    print("Check 2: API health check with database (/api/health)...")
    success, message = check_health_endpoint(url, timeout=15)
    results["api_health"] = (success, message)
    print(f"  {message}\n")

    print("Check 3: Public listings (/api/blog-posts, /api/olympiad-dates)...")
    for endpoint in ("/api/blog-posts", "/api/olympiad-dates"):
        success, message = check_endpoint(url, endpoint, timeout=15)
        results[f"listing{endpoint.replace('/api/', ':')}"] = (success, message)
        print(f"  {message}")
    print()

    print("Check 4: Admin gate (/api/contact-submissions without a session)...")
    success, message = check_endpoint(url, "/api/contact-submissions", timeout=15, expected_status=401)
    results["admin_gate"] = (success, message)
    print(f"  {message}\n")

    return results


def print_summary(results: Dict[str, Tuple[bool, str]], environment: str) -> bool:
    """
    Prints a summary of health check results.

    Returns:
        bool: True if all checks passed, False otherwise
    """
    print(f"{'='*60}")
    print(f"Health Check Summary - {environment.upper()}")
    print(f"{'='*60}\n")

    passed = sum(1 for success, _ in results.values() if success)
    total = len(results)

    for check_name, (success, message) in results.items():
        status = "PASS" if success else "FAIL"
        symbol = "✓" if success else "✗"
        print(f"{symbol} {check_name}: {status}")

    print(f"\nTotal: {passed}/{total} checks passed\n")

    if passed == total:
        print("✓ All health checks passed. Deployment is healthy.\n")
        return True
    else:
        print(f"✗ {total - passed} health check(s) failed. Investigate issues above.\n")
        return False


def main():
    parser = argparse.ArgumentParser(description="Run post-deployment health checks")
    parser.add_argument("--url", required=True, help="Deployment URL to check")
    parser.add_argument(
        "--environment",
        required=True,
        choices=["staging", "production"],
        help="Deployment environment"
    )
    parser.add_argument(
        "--retry",
        type=int,
        default=3,
        help="Number of attempts if checks fail (default: 3)"
    )
    parser.add_argument(
        "--retry-delay",
        type=int,
        default=10,
        help="Delay in seconds between retries (default: 10)"
    )

    args = parser.parse_args()

    attempt = 1
    max_attempts = args.retry

    while attempt <= max_attempts:
        if attempt > 1:
            print(f"\n{'='*60}")
            print(f"Retry attempt {attempt}/{max_attempts}")
            print(f"{'='*60}")
            time.sleep(args.retry_delay)

        results = run_health_checks(args.url, args.environment)
        all_passed = print_summary(results, args.environment)

        if all_passed:
            sys.exit(0)

        attempt += 1

    print(f"{'='*60}", file=sys.stderr)
    print(f"✗ HEALTH CHECKS FAILED AFTER {max_attempts} ATTEMPTS", file=sys.stderr)
    print(f"{'='*60}\n", file=sys.stderr)
    print("Deployment completed but the site may not be healthy.", file=sys.stderr)

    sys.exit(1)


if __name__ == "__main__":
    main()
