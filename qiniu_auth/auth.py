"""七牛请求签名和上传凭证"""

import logging

from qiniu_auth.canonical import build_canonical_request
from qiniu_auth.credential import Credential
from qiniu_auth.put_policy import PutPolicy

logger = logging.getLogger(__name__)

AUTHORIZATION_PREFIX = "Qiniu "


def assemble_request_token(credential, canonical):
    """Qiniu <AccessKey>:<Sign>"""
    return f"{AUTHORIZATION_PREFIX}{credential.access_key}:{credential.sign(canonical)}"


def assemble_policy_token(credential, policy):
    """<AccessKey>:<Sign>:<PutPolicy JSON>

    JSON 原样拼接在凭证末尾，不做 Base64 编码。
    """
    data = policy.to_json()
    logger.debug("Sign upload token: put policy = %s", data)
    return f"{credential.access_key}:{credential.sign(data)}:{data}"


class Auth:
    """七牛签名客户端"""

    def __init__(self, access_key, secret_key):
        self.credential = Credential(access_key, secret_key)

    @property
    def access_key(self):
        return self.credential.access_key

    def sign_raw(self, data):
        return self.credential.sign(data)

    def sign_qiniu_token(self, method, url, content_type=None, body=None):
        """生成请求的 Authorization 值

        参数非法时抛出 SignError 的子类，不会生成签名。
        """
        canonical = build_canonical_request(method, url, content_type, body)
        return assemble_request_token(self.credential, canonical)

    def sign_upload_token_with_policy(self, policy):
        return assemble_policy_token(self.credential, policy)

    def sign_upload_token_with_deadline(self, bucket, key, deadline):
        return self.sign_upload_token_with_policy(PutPolicy.with_deadline(bucket, key, deadline))

    def sign_upload_token(self, bucket, key=None):
        """生成上传凭证，有效期一小时"""
        return self.sign_upload_token_with_policy(PutPolicy(bucket, key))

    def __repr__(self):
        return f"Auth(access_key={self.access_key!r})"
