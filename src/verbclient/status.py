"""HTTP status classification."""

from verbclient.constants import HTTP_STATUS_ERROR_MAX, HTTP_STATUS_ERROR_MIN


def is_error_status(status_code: int) -> bool:
    """Check whether a status code is in the error range.

    Args:
        status_code: HTTP status code.

    Returns:
        True if 400 <= status_code < 600.
    """
    return HTTP_STATUS_ERROR_MIN <= status_code < HTTP_STATUS_ERROR_MAX
