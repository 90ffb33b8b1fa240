"""
Fetch the production sheet as CSV from Google Sheets.

The configured link is the one copied from the browser (".../edit?usp=
sharing"); it is rewritten to the CSV export endpoint before fetching. The
sheet must be shared as "Anyone with the link can view", otherwise Google
answers with its sign-in HTML page instead of CSV.
"""

import logging
import re

import requests

from ..config import FETCH_TIMEOUT_S, HTML_MARKERS

logger = logging.getLogger(__name__)

SHEETS_HOST_MARKER = "docs.google.com/spreadsheets"

_EDIT_SUFFIX = re.compile(r"/edit(?:[?#].*)?$")
_EXPORT_SUFFIX = re.compile(r"/export\?.*$")


class SheetSourceError(RuntimeError):
    """Base class for problems obtaining the sheet document."""


class SheetConfigError(SheetSourceError):
    """The sheet link is missing/invalid or the sheet is not shared publicly."""


class SheetFetchError(SheetSourceError):
    """The request failed or returned a non-success status."""


def validate_sheet_url(url: str | None) -> str:
    """Return the stripped URL, or raise SheetConfigError if unusable."""
    if not url or SHEETS_HOST_MARKER not in url:
        raise SheetConfigError(
            "Please set a valid Google Sheet URL (docs.google.com/spreadsheets/...)."
        )
    return url.strip()


def to_csv_export_url(url: str) -> str:
    """Rewrite an edit-mode sheet link to its CSV export link.

    Links that are not in edit mode (already an export link, a published
    link) are returned unchanged.
    """
    return _EDIT_SUFFIX.sub("/export?format=csv", url)


def to_edit_url(url: str) -> str:
    """Rewrite an export link back to the sheet's edit view."""
    return _EXPORT_SUFFIX.sub("/edit", url)


def is_html_document(body: str) -> bool:
    """True if the body looks like an HTML page rather than CSV."""
    head = body.lstrip()[:64].lower()
    return head.startswith(HTML_MARKERS)


def fetch_sheet_csv(
    url: str,
    session: requests.Session | None = None,
    timeout: float = FETCH_TIMEOUT_S,
) -> str:
    """Fetch the sheet's CSV export and return the document text.

    Raises
    ------
    SheetConfigError : bad link, or HTML returned instead of CSV.
    SheetFetchError  : network failure or non-success HTTP status.
    """
    fetch_url = to_csv_export_url(validate_sheet_url(url))
    s = session or requests.Session()

    logger.info("Fetching sheet CSV from %s", fetch_url)
    try:
        r = s.get(fetch_url, timeout=timeout)
    except requests.RequestException as exc:
        raise SheetFetchError(f"Failed to fetch sheet: {exc}") from exc

    if not r.ok:
        raise SheetFetchError(
            f"Failed to fetch sheet: HTTP {r.status_code} {r.reason or ''}".rstrip()
        )

    # Google Sheets serves UTF-8 CSV, sometimes with a BOM and no declared charset
    r.encoding = "utf-8-sig"
    body = r.text
    if is_html_document(body):
        raise SheetConfigError(
            "Received HTML instead of CSV. Please ensure your Google Sheet's "
            "sharing settings are set to 'Anyone with the link can view'."
        )

    logger.info("Fetched %d characters of CSV", len(body))
    return body
