"""requests 的七牛签名认证

用法::

    auth = QiniuAuth(Auth(access_key, secret_key))
    requests.post(url, json=payload, auth=auth)
"""

import logging

from requests.auth import AuthBase

logger = logging.getLogger(__name__)


class QiniuAuth(AuthBase):
    """为请求添加 Authorization: Qiniu <AccessKey>:<Sign>"""

    def __init__(self, auth):
        self.auth = auth

    def __call__(self, r):
        body = r.body
        # 流式 body（文件或迭代器）不参与签名
        if body is not None and not isinstance(body, (bytes, str)):
            logger.debug("Skip streaming body of %s %s", r.method, r.url)
            body = None
        r.headers["Authorization"] = self.auth.sign_qiniu_token(
            r.method, r.url, r.headers.get("Content-Type"), body
        )
        return r

    def __eq__(self, other):
        return isinstance(other, QiniuAuth) and self.auth.credential == other.auth.credential

    def __ne__(self, other):
        return not self == other
