import io
import json
import sys
import zipfile
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class FakeResp:
    """Stand-in for a streaming requests.Response."""

    def __init__(self, status_code=200, content=b"", reason="OK"):
        self.status_code = status_code
        self.content = content
        self.reason = reason
        self.closed = False

    def iter_content(self, chunk_size=8192):
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start:start + chunk_size]

    def json(self):
        return json.loads(self.content)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def make_in_memory_zip(files):
    bio = io.BytesIO()
    with zipfile.ZipFile(bio, mode="w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return bio.getvalue()


class Logger:
    def __init__(self):
        self.messages = []

    def __call__(self, msg, **kwargs):
        self.messages.append((msg, kwargs))

    def text(self):
        return "\n".join(msg for msg, _ in self.messages)


class FakeHttp:
    """Routes requests.get calls to canned responses or exceptions by URL."""

    def __init__(self):
        self.routes = {}
        self.calls = []
        self.responses = []

    def add(self, url, response):
        self.routes[url] = response

    def add_json(self, url, payload, status_code=200):
        self.add(url, FakeResp(status_code, json.dumps(payload).encode()))

    def __call__(self, url, stream=False, timeout=None):
        self.calls.append(url)
        route = self.routes.get(url)
        if route is None:
            return self._record(FakeResp(404, b"not found", "Not Found"))
        if isinstance(route, Exception):
            raise route
        # Fresh response per call so repeated URLs can be fetched again
        return self._record(FakeResp(route.status_code, route.content, route.reason))

    def _record(self, response):
        self.responses.append(response)
        return response


@pytest.fixture
def fake_http(monkeypatch):
    http = FakeHttp()
    monkeypatch.setattr("requests.get", http)
    return http


@pytest.fixture
def logger():
    return Logger()
