"""上传策略（PutPolicy）"""

import json
import time
from enum import Enum

DEFAULT_EXPIRES = 3600

_MAX_U64 = 2 ** 64 - 1


class KnownName(Enum):
    """已知的上传策略字段"""

    SCOPE = "scope"
    IS_PREFIXAL_SCOPE = "isPrefixalScope"
    DEADLINE = "deadline"
    INSERT_ONLY = "insertOnly"
    END_USER = "endUser"
    RETURN_URL = "returnUrl"
    RETURN_BODY = "returnBody"
    CALLBACK_URL = "callbackUrl"
    CALLBACK_HOST = "callbackHost"
    CALLBACK_BODY = "callbackBody"
    CALLBACK_BODY_TYPE = "callbackBodyType"
    PERSISTENT_OPS = "persistentOps"
    PERSISTENT_NOTIFY_URL = "persistentNotifyUrl"
    PERSISTENT_PIPELINE = "persistentPipeline"
    FORCESAVE_KEY = "forcesaveKey"
    SAVE_KEY = "saveKey"
    FSIZE_MIN = "fsizeMin"
    FSIZE_LIMIT = "fsizeLimit"
    DETECT_MIME = "detectMime"
    MIME_LIMIT = "mimeLimit"
    FILE_TYPE = "fileType"


_KNOWN_BY_VALUE = {member.value: member for member in KnownName}


class Name:
    """策略字段名：已知字段或任意扩展字段

    相等性和哈希只取决于字段名字符串，因此 Name("scope") == "scope"。
    """

    __slots__ = ("_value", "known")

    def __init__(self, value):
        if isinstance(value, Name):
            value = value._value
        elif isinstance(value, KnownName):
            value = value.value
        elif not isinstance(value, str):
            raise TypeError(f"policy field name must be str, not {type(value).__name__}")
        self._value = value
        self.known = _KNOWN_BY_VALUE.get(value)

    @property
    def is_extension(self):
        return self.known is None

    def as_str(self):
        return self._value

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"Name({self._value!r})"

    def __eq__(self, other):
        if isinstance(other, Name):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __hash__(self):
        return hash(self._value)


for _member in KnownName:
    setattr(Name, _member.name, Name(_member))
del _member


def _check_value(value):
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        if value < 0 or value > _MAX_U64:
            raise ValueError(f"policy value out of range: {value}")
        return value
    raise TypeError(f"policy value must be str or int, not {type(value).__name__}")


class PutPolicy:
    """上传策略，总是包含 scope 和 deadline

    不是线程安全的，同一个策略不要在多个线程中 put。
    """

    def __init__(self, bucket, key=None, deadline=None):
        if deadline is None:
            deadline = int(time.time()) + DEFAULT_EXPIRES
        self._fields = {}
        scope = bucket if key is None else f"{bucket}:{key}"
        self.put(Name.SCOPE, scope)
        self.put(Name.DEADLINE, deadline)

    @classmethod
    def with_deadline(cls, bucket, key, deadline):
        return cls(bucket, key, deadline)

    def put(self, name, value):
        """设置字段，已存在则覆盖，返回 self 以便链式调用"""
        name = Name(name)
        value = _check_value(value)
        self._fields[name] = value
        return self

    def get(self, name, default=None):
        return self._fields.get(Name(name), default)

    def __getitem__(self, name):
        return self._fields[Name(name)]

    def __contains__(self, name):
        return Name(name) in self._fields

    def __len__(self):
        return len(self._fields)

    def __iter__(self):
        return iter(self._fields)

    def __repr__(self):
        return f"PutPolicy({self.to_dict()!r})"

    def to_dict(self):
        return {name.as_str(): value for name, value in self._fields.items()}

    def to_json(self):
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


def new_policy(bucket, key=None, deadline=None):
    return PutPolicy(bucket, key, deadline)
