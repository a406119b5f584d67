"""Launcher: starts the MkTree Streamlit app and opens the browser.

    python run.py [OUTLINE_FILE] [--fence] [--port PORT]

An outline file, if given, is pre-filled into the page through the
``outline`` query parameter.
"""

import argparse
import sys
import threading
import time
import webbrowser
from pathlib import Path
from urllib.parse import urlencode

import requests


PORT = 8501
URL = f"http://localhost:{PORT}"

APP_PATH = Path(__file__).resolve().parent / "src" / "MkTree" / "app.py"


def browser_url(base_url: str, outline: str = "", fenced: bool = False) -> str:
    """Return the page URL with the outline and fence settings as query parameters."""
    params = {}
    if outline:
        params["outline"] = outline
    if fenced:
        params["fence"] = "1"
    if not params:
        return base_url
    return f"{base_url}/?{urlencode(params)}"


def _wait_and_open_browser(
    url: str = URL,
    open_url: str | None = None,
    attempts: int = 30,
    delay: float = 1.0,
) -> bool:
    """Poll *url* until the Streamlit server answers, then open *open_url*.

    Returns True once the browser was opened, False if the server never
    answered within *attempts* polls.
    """
    for _ in range(attempts):
        try:
            resp = requests.get(url, timeout=2)
            if resp.status_code == 200:
                webbrowser.open(open_url or url)
                return True
        except requests.RequestException:
            pass
        time.sleep(delay)
    return False


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Launch the MkTree web UI")
    parser.add_argument("file", nargs="?", help="Outline file to pre-fill")
    parser.add_argument(
        "--fence",
        action="store_true",
        help="Pre-select the Markdown code fence option",
    )
    parser.add_argument("--port", type=int, default=PORT)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    outline = ""
    if args.file:
        outline = Path(args.file).read_text(encoding="utf-8-sig")

    base_url = f"http://localhost:{args.port}"
    open_url = browser_url(base_url, outline, args.fence)

    # Open browser in a background thread once the server is up
    threading.Thread(
        target=_wait_and_open_browser,
        args=(base_url, open_url),
        daemon=True,
    ).start()

    # Make MkTree importable when running from a checkout
    src_dir = str(APP_PATH.parent.parent)
    if src_dir not in sys.path:
        sys.path.insert(0, src_dir)

    from streamlit.web import bootstrap

    bootstrap.run(
        str(APP_PATH),
        is_hello=False,
        args=[],
        flag_options={
            "server.headless": True,
            "server.port": args.port,
            "browser.gatherUsageStats": False,
        },
    )


if __name__ == "__main__":
    main()
