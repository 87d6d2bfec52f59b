"""构建七牛请求签名的待签名字符串

格式::

    <METHOD> <path>[?<query>]
    Host: <host>
    [Content-Type: <contentType>]

    [<body>]

只有同时提供了 body 和 Content-Type，且 Content-Type 不是
application/octet-stream 时，body 才参与签名。
"""

import logging
import re
from collections import namedtuple
from urllib.parse import urlsplit

import idna
from requests.utils import requote_uri
from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url as parse_location

from qiniu_auth.credential import to_bytes
from qiniu_auth.errors import InvalidContentType, InvalidMethod, InvalidUrl, MissingHost

logger = logging.getLogger(__name__)

OCTET_STREAM = b"application/octet-stream"

# RFC 7230 token
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# WHATWG forbidden host code points
_FORBIDDEN_HOST_RE = re.compile(r"[\x00-\x20#%/:<>?@\[\\\]^|\x7f]")

RequestUrl = namedtuple("RequestUrl", ["path", "query", "host"])


def parse_method(method):
    """校验 HTTP 方法并转为大写"""
    if not isinstance(method, str) or not _METHOD_RE.fullmatch(method):
        raise InvalidMethod(method)
    return method.upper()


def _normalize_host(url, host):
    """非 ASCII 域名转为 IDNA（xn--）形式，并拒绝包含非法字符的 host"""
    if host.startswith("["):
        return host.lower()
    if not host.isascii():
        try:
            host = idna.encode(host, uts46=True).decode("ascii")
        except idna.IDNAError as e:
            raise InvalidUrl(url, f"invalid host: {e}") from e
    host = host.lower()
    if _FORBIDDEN_HOST_RE.search(host):
        raise InvalidUrl(url, "invalid host")
    return host


def parse_url(url):
    """解析并规范化 URL，返回 RequestUrl(path, query, host)

    path 和 query 做百分号编码并去掉 `.`/`..` 路径段，与 requests 实际发送的一致。
    没有 scheme 或无法解析时抛出 InvalidUrl，没有 host 时抛出 MissingHost。
    """
    if isinstance(url, RequestUrl):
        return url
    if not isinstance(url, str):
        raise InvalidUrl(url, "expected a string")
    try:
        parts = urlsplit(url)
        # 端口非法时访问 port 会抛出 ValueError
        parts.port
    except ValueError as e:
        raise InvalidUrl(url, str(e)) from e
    if not parts.scheme:
        raise InvalidUrl(url, "relative URL without a base")
    if not parts.hostname:
        raise MissingHost(url)

    try:
        parsed = parse_location(url)
    except LocationParseError as e:
        raise InvalidUrl(url, str(e)) from e
    if not parsed.host:
        raise MissingHost(url)
    host = _normalize_host(url, parsed.host)

    # urllib3 只规范化 http/https，其余 scheme 在这里补上编码
    path = requote_uri(parsed.path or "/")
    query = requote_uri(parsed.query) if parsed.query else None
    return RequestUrl(path, query, host)


def parse_content_type(content_type):
    """校验 Content-Type 是合法的 header 值，返回其字节"""
    if isinstance(content_type, str):
        value = content_type.encode("utf-8")
    elif isinstance(content_type, (bytes, bytearray, memoryview)):
        value = bytes(content_type)
    else:
        raise InvalidContentType(content_type, "expected str or bytes")

    for b in value:
        if (b < 0x20 and b != 0x09) or b == 0x7F:
            raise InvalidContentType(content_type, "control character")
    return value


def build_canonical_request(method, url, content_type=None, body=None):
    """生成请求签名使用的字节串"""
    method = parse_method(method)
    url = parse_url(url)
    if content_type is not None:
        content_type = parse_content_type(content_type)

    buf = bytearray()
    buf += method.encode("ascii")
    buf += b" "
    buf += url.path.encode("utf-8")
    if url.query:
        buf += b"?"
        buf += url.query.encode("utf-8")

    buf += b"\nHost: "
    buf += url.host.encode("utf-8")

    if content_type is not None:
        buf += b"\nContent-Type: "
        buf += content_type

    buf += b"\n\n"

    if body is not None and content_type is not None and content_type != OCTET_STREAM:
        buf += to_bytes(body)

    logger.debug("Make signature: string to be signed = %r", bytes(buf))
    return bytes(buf)
