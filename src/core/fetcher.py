"""Plain HTTP GET with strict status checking."""
from contextlib import contextmanager

import requests

from .constants import REQUEST_TIMEOUT, CHUNK_SIZE


@contextmanager
def open_stream(url, timeout=REQUEST_TIMEOUT):
    """Yield a streaming response for url, closed on every exit path.

    Raises:
        requests.exceptions.HTTPError: Status other than 200
        requests.exceptions.RequestException: Network-level failure
    """
    with requests.get(url, stream=True, timeout=timeout) as response:
        if response.status_code != 200:
            raise requests.exceptions.HTTPError(
                f"invalid status: {url!r}: {response.status_code} {response.reason}",
                response=response,
            )
        yield response


def iter_body(response, chunk_size=CHUNK_SIZE):
    for chunk in response.iter_content(chunk_size=chunk_size):
        if chunk:
            yield chunk


def fetch_bytes(url, timeout=REQUEST_TIMEOUT) -> bytes:
    """Return the full response body of url."""
    with open_stream(url, timeout=timeout) as response:
        return b"".join(iter_body(response))


def fetch_json(url, timeout=REQUEST_TIMEOUT):
    """GET url and decode the body as JSON (ValueError on bad JSON)."""
    with open_stream(url, timeout=timeout) as response:
        return response.json()
