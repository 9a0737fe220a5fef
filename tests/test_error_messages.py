import zipfile
from unittest.mock import Mock

import pytest
import requests

from core.config_manager import InvalidModListError
from utils.error_messages import get_user_friendly_error, suggest_fix_for_error


def http_error(status):
    return requests.exceptions.HTTPError("invalid status", response=Mock(status_code=status))


@pytest.mark.parametrize("exception, expected", [
    (InvalidModListError("abc"), 'invalid_mod_list'),
    (requests.exceptions.ConnectionError("refused"), 'network_timeout'),
    (requests.exceptions.Timeout("slow"), 'network_timeout'),
    (http_error(404), 'network_404'),
    (http_error(503), 'http_status'),
    (zipfile.BadZipFile("bad"), 'corrupted_archive'),
    (PermissionError("denied"), 'permission_denied'),
    (OSError("No space left on device"), 'disk_space'),
    (RuntimeError("???"), None),
])
def test_suggest_fix_for_error(exception, expected):
    assert suggest_fix_for_error(exception) == expected


def test_unknown_error_type_includes_details():
    message = get_user_friendly_error(None, "weird failure")
    assert "weird failure" in message


def test_known_error_type_message():
    assert "404" in get_user_friendly_error('network_404')
