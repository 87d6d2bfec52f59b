"""签名错误类型

所有错误都是输入校验失败，在计算签名之前抛出，不可重试。
"""


class SignError(ValueError):
    """签名失败的基类，value 为出错的输入"""

    kind = "input"

    def __init__(self, value, reason=None):
        self.value = value
        self.reason = reason
        message = f"invalid {self.kind}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidMethod(SignError):
    kind = "method"


class InvalidUrl(SignError):
    kind = "url"


class InvalidContentType(SignError):
    kind = "content-type"


class MissingHost(InvalidUrl):
    """URL 可以解析但没有 host"""

    def __init__(self, value):
        super().__init__(value, "missing host")
