"""七牛 AK/SK 签名：请求签名和上传凭证"""

from qiniu_auth.auth import Auth, assemble_policy_token, assemble_request_token
from qiniu_auth.canonical import build_canonical_request, parse_content_type, parse_method, parse_url
from qiniu_auth.credential import Credential, sign
from qiniu_auth.errors import InvalidContentType, InvalidMethod, InvalidUrl, MissingHost, SignError
from qiniu_auth.put_policy import KnownName, Name, PutPolicy, new_policy
from qiniu_auth.requests_auth import QiniuAuth

__version__ = "0.1.0"

__all__ = [
    "Auth",
    "Credential",
    "InvalidContentType",
    "InvalidMethod",
    "InvalidUrl",
    "KnownName",
    "MissingHost",
    "Name",
    "PutPolicy",
    "QiniuAuth",
    "SignError",
    "assemble_policy_token",
    "assemble_request_token",
    "build_canonical_request",
    "new_policy",
    "parse_content_type",
    "parse_method",
    "parse_url",
    "sign",
]
