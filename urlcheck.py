#Author Piotr Tarnawski
#angrysysops.com
# X: -> @TheTechWorldPod


import json
import re
import sys
from pathlib import Path

import requests

DATA_FILE = Path(__file__).resolve().parent / "url_checks.json"

ACCESSIBLE = "Accessible"
BLOCKED = "Blocked"

# scheme? + dotted host + 2-6 char tld + optional path
URL_PATTERN = re.compile(r"(https?://)?([\da-z.-]+)\.([a-z.]{2,6})([/\w .-]*)/?", re.ASCII)


def ensure_data_file(path: Path = DATA_FILE) -> None:
    """Create an empty results file on first run."""
    if path.exists():
        return

    try:
        path.write_text(json.dumps([]), encoding="utf-8")
    except OSError as e:
        print(f"[!] Error creating results file: {e}", file=sys.stderr)


def load_results(path: Path = DATA_FILE) -> list:
    """Read every stored check. Anything unreadable counts as no results."""
    try:
        data = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"[!] Error loading results: {e}", file=sys.stderr)
        return []

    if not data.strip():
        return []

    try:
        results = json.loads(data)
    except ValueError as e:
        print(f"[!] Error loading results: {e}", file=sys.stderr)
        return []

    if not isinstance(results, list):
        print(f"[!] Error loading results: expected a list in {path.name}", file=sys.stderr)
        return []

    if not all(isinstance(r, dict) for r in results):
        print(f"[!] Error loading results: unexpected entry in {path.name}", file=sys.stderr)
        return []

    return results


def save_results(results: list, path: Path = DATA_FILE) -> None:
    # whole file is rewritten, no locking - last writer wins
    try:
        path.write_text(json.dumps(results, indent=2), encoding="utf-8")
    except OSError as e:
        print(f"[!] Error saving results: {e}", file=sys.stderr)


def is_valid_url(url: str) -> bool:
    return URL_PATTERN.fullmatch(url) is not None


def normalize_url(raw_url: str) -> str:
    """Make sure the URL has a protocol."""
    url = raw_url.strip()

    if not url.lower().startswith(("http://", "https://")):
        # Default to HTTPS if user is lazy (they always are)
        url = "https://" + url

    return url


def check_url_accessibility(url: str) -> str:
    """
    Request the URL once and classify it.

    Only an HTTP 200 counts as accessible. Other status codes and
    connection problems of any kind are reported as blocked.
    """
    url = normalize_url(url)

    try:
        # no timeout, no retries, redirects are not followed
        response = requests.get(url, allow_redirects=False)
    except (requests.exceptions.RequestException, ValueError) as e:
        # bad host labels surface as a bare urllib3 LocationParseError (a ValueError)
        print(f"[!] Error checking URL: {e}", file=sys.stderr)
        return BLOCKED

    return ACCESSIBLE if response.status_code == 200 else BLOCKED


def show_menu() -> None:
    print("\n--- URL Checker CLI Application ---")
    print("1. Check a URL")
    print("2. View URL Results")
    print("3. Exit")


def process_url(url: str, path: Path = DATA_FILE) -> None:
    if not is_valid_url(url):
        print("Invalid URL format.")
        return

    print("Checking URL...")
    status = check_url_accessibility(url)
    results = load_results(path)

    results.append({"url": url, "status": status})
    save_results(results, path)

    print(f"URL: {url}\nStatus: {status}")


def view_results(path: Path = DATA_FILE) -> None:
    results = load_results(path)
    if not results:
        print("\nNo URL checks have been performed yet.")
        return

    print("\n--- URL Check Results ---")
    for i, result in enumerate(results, 1):
        print(f"{i}. URL: {result.get('url')} | Status: {result.get('status')}")


def main(data_file: Path = DATA_FILE) -> int:
    ensure_data_file(data_file)

    while True:
        show_menu()
        try:
            option = input("Choose an option: ").strip()
            if option == "1":
                url = input("Enter a URL to check: ").strip()
                process_url(url, data_file)
            elif option == "2":
                view_results(data_file)
            elif option == "3":
                print("Goodbye!")
                return 0
            else:
                print("Invalid option. Please try again.")
        except EOFError:
            # stdin closed, same as choosing Exit
            print("\nGoodbye!")
            return 0


if __name__ == "__main__":
    sys.exit(main())
