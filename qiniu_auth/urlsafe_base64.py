"""URL 安全的 Base64 编解码（`+`/`/` 替换为 `-`/`_`，保留 `=` 填充）"""

import base64
import binascii

DecodeError = binascii.Error


def _to_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected str or bytes-like object, not {type(data).__name__}")


def encode(data):
    """编码为 URL 安全的 Base64 字符串"""
    return base64.urlsafe_b64encode(_to_bytes(data)).decode("ascii")


def decode(data):
    """解码 URL 安全的 Base64，格式错误时抛出 DecodeError"""
    return base64.urlsafe_b64decode(_to_bytes(data))
