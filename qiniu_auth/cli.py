"""
七牛签名命令行工具

使用方法:
    qiniu-auth [-v] sign <AK> <SK> <data>
    qiniu-auth [-v] request_token <AK> <SK> <method> <url> [content_type] [body]
    qiniu-auth [-v] upload_token <AK> <SK> <bucket> [key] [deadline]
    qiniu-auth [-v] policy <bucket> [key] [deadline]
"""

import logging
import sys

from qiniu_auth.auth import Auth
from qiniu_auth.errors import SignError
from qiniu_auth.put_policy import PutPolicy

USAGE = """Usage: qiniu-auth [-v] <command> [args...]

Commands:
  sign <AK> <SK> <data>
  request_token <AK> <SK> <method> <url> [content_type] [body]
  upload_token <AK> <SK> <bucket> [key] [deadline]
  policy <bucket> [key] [deadline]"""


def _usage(line=None):
    print(line or USAGE)
    sys.exit(1)


def _deadline(value):
    try:
        deadline = int(value)
    except ValueError:
        _usage(f"Invalid deadline: {value}")
    if deadline < 0:
        _usage(f"Invalid deadline: {value}")
    return deadline


def _policy(args):
    bucket = args[0]
    key = args[1] if len(args) > 1 and args[1] else None
    deadline = _deadline(args[2]) if len(args) > 2 else None
    return PutPolicy(bucket, key, deadline)


def run(command, args):
    """执行命令，返回要输出的结果"""
    if command == "sign":
        if len(args) != 3:
            _usage("Usage: sign <AK> <SK> <data>")
        ak, sk, data = args
        return Auth(ak, sk).sign_raw(data)

    elif command == "request_token":
        if len(args) < 4 or len(args) > 6:
            _usage("Usage: request_token <AK> <SK> <method> <url> [content_type] [body]")
        ak, sk, method, url = args[:4]
        content_type = args[4] if len(args) > 4 else None
        body = args[5] if len(args) > 5 else None
        return Auth(ak, sk).sign_qiniu_token(method, url, content_type, body)

    elif command == "upload_token":
        if len(args) < 3 or len(args) > 5:
            _usage("Usage: upload_token <AK> <SK> <bucket> [key] [deadline]")
        ak, sk = args[:2]
        return Auth(ak, sk).sign_upload_token_with_policy(_policy(args[2:]))

    elif command == "policy":
        if len(args) < 1 or len(args) > 3:
            _usage("Usage: policy <bucket> [key] [deadline]")
        return _policy(args).to_json()

    _usage(f"Unknown command: {command}")


def main(argv=None):
    """命令行入口"""
    argv = list(sys.argv[1:] if argv is None else argv)

    level = logging.WARNING
    if argv and argv[0] == "-v":
        level = logging.DEBUG
        argv = argv[1:]
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if not argv:
        _usage()

    try:
        result = run(argv[0], argv[1:])
    except SignError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(result)


if __name__ == "__main__":
    main()
