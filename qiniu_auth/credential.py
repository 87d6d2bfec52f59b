"""AK/SK 凭证与 HMAC-SHA1 签名"""

import hashlib
import hmac
import logging
from dataclasses import dataclass, field

from qiniu_auth import urlsafe_base64

logger = logging.getLogger(__name__)


def to_bytes(data):
    """str 按 UTF-8 编码，bytes 类对象原样返回，其他类型抛出 TypeError"""
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected str or bytes-like object, not {type(data).__name__}")


def sign(secret_key, data):
    """生成 HMAC-SHA1 签名，返回 URL 安全的 Base64 字符串"""
    digest = hmac.new(to_bytes(secret_key), to_bytes(data), hashlib.sha1).digest()
    return urlsafe_base64.encode(digest)


@dataclass(frozen=True)
class Credential:
    """保存 AccessKey 和 SecretKey，创建后不可修改

    SecretKey 只作为 HMAC 密钥使用，不会出现在 repr 和日志中。
    """

    access_key: str
    secret_key: bytes = field(repr=False)

    def __post_init__(self):
        object.__setattr__(self, "secret_key", to_bytes(self.secret_key))
        logger.debug("Init Credential: access_key: %s, secret_key: ******", self.access_key)

    def sign(self, data):
        return sign(self.secret_key, data)
