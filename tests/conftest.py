"""Shared pytest fixtures."""

import pytest

from qiniu_auth import Auth

ACCESS_KEY = "abcdefghklmnopq"
SECRET_KEY = "1234567890"

URL = "http://sdfd.api.qiniu.com/sdfe/hubs/hhxd/f?start=1234556"
JSON_BODY = b'{"sdfjefdkmkfjgkdsdfevfd984594": "dfj832cmad2923"}'
JSON_TOKEN = "Qiniu abcdefghklmnopq:0sCQ2yz6nsQeVT2E7Rk0qxWp8Y8="
OCTET_STREAM_TOKEN = "Qiniu abcdefghklmnopq:VSnCW9LpK1xhuxdKMr4fE_SJHuU="


@pytest.fixture
def auth():
    return Auth(ACCESS_KEY, SECRET_KEY)
