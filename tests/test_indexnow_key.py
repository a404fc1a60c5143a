"""
Tests for the IndexNow key file emitter.

Pure filesystem tests: token + directory in → file + KeyFileResult out.
"""

import logging
from pathlib import Path

import pytest

from edgesite.core.services.indexnow_key import (
    KeyFileResult,
    emit_key_file,
    key_file_name,
    looks_like_indexnow_key,
)

KEY = "056d016a-3d9d-4630-bbc4-2c7f6e0f67cc"
LOGGER = "edgesite.core.services.indexnow_key"


class TestEmitWritten:
    def test_example_key(self, tmp_path: Path):
        public = tmp_path / "public"
        result = emit_key_file(KEY, public)

        target = public / f"{KEY}.txt"
        assert result.ok
        assert result.status == "written"
        assert result.path == target
        assert target.read_bytes() == KEY.encode("utf-8")

    @pytest.mark.parametrize("token", ["abc12345", "A-b-C-1-2-3", "x" * 128, "ключ-ünïcode"])
    def test_name_and_content_equal_token(self, tmp_path: Path, token: str):
        result = emit_key_file(token, tmp_path)
        assert result.ok
        target = tmp_path / f"{token}.txt"
        assert target.read_text(encoding="utf-8") == token

    def test_no_trailing_newline(self, tmp_path: Path):
        emit_key_file(KEY, tmp_path)
        assert not (tmp_path / f"{KEY}.txt").read_bytes().endswith(b"\n")

    def test_creates_nested_missing_dir(self, tmp_path: Path):
        public = tmp_path / "a" / "b" / "public"
        result = emit_key_file(KEY, public)
        assert result.ok
        assert public.is_dir()

    def test_existing_dir_is_fine(self, tmp_path: Path):
        (tmp_path / "public").mkdir()
        (tmp_path / "public" / "robots.txt").write_text("User-agent: *\n")
        result = emit_key_file(KEY, tmp_path / "public")
        assert result.ok
        assert (tmp_path / "public" / "robots.txt").exists()

    def test_idempotent(self, tmp_path: Path):
        first = emit_key_file(KEY, tmp_path)
        second = emit_key_file(KEY, tmp_path)
        assert first.ok and second.ok
        assert [p.name for p in tmp_path.iterdir()] == [f"{KEY}.txt"]
        assert (tmp_path / f"{KEY}.txt").read_text() == KEY

    def test_overwrites_stale_content(self, tmp_path: Path):
        target = tmp_path / f"{KEY}.txt"
        target.write_text("stale content\n")
        emit_key_file(KEY, tmp_path)
        assert target.read_text() == KEY

    def test_accepts_str_dir(self, tmp_path: Path):
        result = emit_key_file(KEY, str(tmp_path / "public"))
        assert result.ok

    def test_logs_success(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.INFO, logger=LOGGER)
        emit_key_file(KEY, tmp_path)
        assert any("Created IndexNow key file" in r.message for r in caplog.records)


class TestEmitSkipped:
    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token_skips(self, tmp_path: Path, token, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.WARNING, logger=LOGGER)
        public = tmp_path / "public"

        result = emit_key_file(token, public)

        assert result.skipped
        assert not result.token_present
        assert result.path is None
        assert not public.exists()
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "not configured" in warnings[0].message


class TestEmitFailed:
    def test_output_dir_is_a_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.ERROR, logger=LOGGER)
        blocker = tmp_path / "public"
        blocker.write_text("not a directory")

        result = emit_key_file(KEY, blocker)

        assert result.failed
        assert result.token_present
        assert result.error
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "Failed to create IndexNow key file" in errors[0].message

    def test_target_is_a_directory(self, tmp_path: Path):
        (tmp_path / f"{KEY}.txt").mkdir()
        result = emit_key_file(KEY, tmp_path)
        assert result.failed
        assert result.path == tmp_path / f"{KEY}.txt"

    def test_write_error_does_not_raise(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        def _deny(self, data):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "write_bytes", _deny)
        result = emit_key_file(KEY, tmp_path)
        assert result.failed
        assert "Permission denied" in result.error

    def test_unrepresentable_name(self, tmp_path: Path):
        result = emit_key_file("bad\x00key", tmp_path)
        assert result.failed

    def test_absolute_token_stays_out(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.ERROR, logger=LOGGER)
        public = tmp_path / "public"
        elsewhere = tmp_path / "outside" / "pwned"
        elsewhere.parent.mkdir()

        result = emit_key_file(str(elsewhere), public)

        assert result.failed
        assert result.path is None
        assert not (tmp_path / "outside" / "pwned.txt").exists()
        assert not public.exists()
        assert any(r.levelno == logging.ERROR for r in caplog.records)

    @pytest.mark.parametrize("token", ["../escaped", "nested/key", "../../up"])
    def test_relative_escape_stays_out(self, tmp_path: Path, token: str):
        public = tmp_path / "site" / "public"

        result = emit_key_file(token, public)

        assert result.failed
        assert not any(p.is_file() for p in tmp_path.rglob("*.txt"))


class TestKeyFileResult:
    def test_defaults(self):
        r = KeyFileResult()
        assert r.skipped
        assert not r.ok
        assert not r.failed

    def test_to_dict(self, tmp_path: Path):
        r = KeyFileResult(status="written", token_present=True, path=tmp_path / "k.txt")
        d = r.to_dict()
        assert d["status"] == "written"
        assert d["path"] == str(tmp_path / "k.txt")
        assert d["error"] is None


class TestHelpers:
    def test_key_file_name(self):
        assert key_file_name(KEY) == f"{KEY}.txt"

    def test_uuid_looks_like_key(self):
        assert looks_like_indexnow_key(KEY)

    @pytest.mark.parametrize("token", ["short", "has space in it", "under_score_key", "x" * 129])
    def test_not_a_key(self, token: str):
        assert not looks_like_indexnow_key(token)
