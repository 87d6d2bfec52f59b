"""Tests for the command-line entry point."""

import json

import pytest

from qiniu_auth.cli import main

from .conftest import ACCESS_KEY, JSON_BODY, JSON_TOKEN, OCTET_STREAM_TOKEN, SECRET_KEY, URL


def _run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out.strip()


class TestCommands:
    def test_sign(self, capsys):
        assert _run(capsys, "sign", ACCESS_KEY, SECRET_KEY, "test") == "mSNBTR7uS2crJsyFr2Amwv1LaYg="

    def test_request_token(self, capsys):
        out = _run(capsys, "request_token", ACCESS_KEY, SECRET_KEY, "POST", URL, "application/json", JSON_BODY.decode())
        assert out == JSON_TOKEN

    def test_request_token_octet_stream(self, capsys):
        out = _run(capsys, "request_token", ACCESS_KEY, SECRET_KEY, "POST", URL, "application/octet-stream")
        assert out == OCTET_STREAM_TOKEN

    def test_upload_token(self, capsys):
        out = _run(capsys, "upload_token", ACCESS_KEY, SECRET_KEY, "litic", "key", "1700000000")
        ak, _, data = out.split(":", 2)
        assert ak == ACCESS_KEY
        assert json.loads(data) == {"scope": "litic:key", "deadline": 1700000000}

    def test_policy(self, capsys):
        assert _run(capsys, "policy", "litic", "", "5") == '{"scope":"litic","deadline":5}'

    def test_verbose(self, capsys):
        assert _run(capsys, "-v", "sign", ACCESS_KEY, SECRET_KEY, "test") == "mSNBTR7uS2crJsyFr2Amwv1LaYg="


class TestFailures:
    def test_no_command(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
        assert "Usage" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["frobnicate"])
        assert exc.value.code == 1
        assert "Unknown command: frobnicate" in capsys.readouterr().out

    def test_wrong_arity(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["sign", ACCESS_KEY])
        assert exc.value.code == 1
        assert "Usage: sign" in capsys.readouterr().out

    def test_bad_deadline(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["policy", "litic", "key", "soon"])
        assert exc.value.code == 1
        assert "Invalid deadline" in capsys.readouterr().out

    def test_sign_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["request_token", ACCESS_KEY, SECRET_KEY, "POST", "file:///a"])
        assert exc.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: invalid url")
        assert SECRET_KEY not in err
