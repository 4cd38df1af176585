"""
감사 로그 기록 단위 테스트
"""

import os
import tempfile
import threading
import unittest
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock, patch

from recycle_bin.audit import AuditSink, format_audit_timestamp
from recycle_bin.core.configuration import XmlConfigProvider
from recycle_bin.core.error_handling import (
    ConfigurationError,
    FileSystemError,
    RecycleBinSecurityError,
)
from tests.fakes import write_configuration


class TestAuditSink(unittest.TestCase):
    """감사 로그 테스트"""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.backup_folder = Path(self._tmp.name) / "Backups"
        self.provider = Mock(spec=XmlConfigProvider)
        self.provider.backup_folder = str(self.backup_folder)
        self.moment = datetime(2024, 1, 1, 22, 5, 6, 42000)
        self.sink = AuditSink(self.provider, clock=lambda: self.moment)

    def tearDown(self):
        self._tmp.cleanup()

    def _read(self) -> bytes:
        return (self.backup_folder / "Log" / "RecycleBin.log").read_bytes()

    def test_timestamp_format(self):
        self.assertEqual(format_audit_timestamp(self.moment), "(2024:01:01 10:05:06.042):")

    def test_write_creates_log_directory_and_line(self):
        """첫 기록 시 디렉토리 생성 및 CRLF 줄 추가"""
        self.sink.write("hello")

        self.assertEqual(self._read(), b"(2024:01:01 10:05:06.042): hello\r\n")

    def test_write_appends_without_truncating(self):
        """기존 내용 유지"""
        log_dir = self.backup_folder / "Log"
        log_dir.mkdir(parents=True)
        (log_dir / "RecycleBin.log").write_bytes(b"existing\r\n")

        self.sink.write("first")
        self.sink.write("second")

        lines = self._read().split(b"\r\n")
        self.assertEqual(lines[0], b"existing")
        self.assertTrue(lines[1].endswith(b" first"))
        self.assertTrue(lines[2].endswith(b" second"))

    def test_log_path_is_resolved_once(self):
        """로그 경로는 첫 기록 때 한 번만 조회"""
        provider = Mock()
        provider.backup_folder = str(self.backup_folder)
        sink = AuditSink(provider, clock=lambda: self.moment)

        sink.write("a")
        provider.backup_folder = str(Path(self._tmp.name) / "Elsewhere")
        sink.write("b")

        self.assertEqual(len(self._read().split(b"\r\n")), 3)
        self.assertFalse((Path(self._tmp.name) / "Elsewhere").exists())

    def test_concurrent_writes_are_serialized(self):
        """동시 기록 시 줄이 섞이지 않음"""
        threads = [
            threading.Thread(target=self.sink.write, args=(f"message {i}",))
            for i in range(20)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        lines = [line for line in self._read().split(b"\r\n") if line]
        self.assertEqual(len(lines), 20)
        for line in lines:
            self.assertTrue(line.startswith(b"(2024:01:01 10:05:06.042): message "))

    def test_permission_denied_raises_security_error(self):
        """권한 거부는 상세 정보와 함께 보안 오류로 재발생"""
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with self.assertRaises(RecycleBinSecurityError) as ctx:
                self.sink.write("x")

        self.assertIn("refused permission set", str(ctx.exception))
        self.assertIn(str(self.backup_folder / "Log"), str(ctx.exception))

    def test_unopenable_log_raises_filesystem_error(self):
        with patch("builtins.open", side_effect=IsADirectoryError("is a directory")):
            with self.assertRaises(FileSystemError):
                self.sink.write("x")

    def test_blank_backup_folder_writes_nothing_relative_to_cwd(self):
        """백업 폴더가 비어 있으면 현재 디렉토리에 로그를 만들지 않음"""
        workdir = Path(self._tmp.name) / "workdir"
        workdir.mkdir()
        provider = XmlConfigProvider(write_configuration(Path(self._tmp.name), ""))
        sink = AuditSink(provider, clock=lambda: self.moment)
        previous_cwd = os.getcwd()
        os.chdir(workdir)
        try:
            with self.assertRaises(ConfigurationError):
                sink.write("Entering SPSite delete method")
        finally:
            os.chdir(previous_cwd)

        self.assertEqual(list(workdir.iterdir()), [])

    def test_entries_are_mirrored_to_application_log(self):
        with self.assertLogs("recycle_bin.audit", level="INFO") as captured:
            self.sink.write("mirrored")

        self.assertIn("mirrored", captured.output[0])


if __name__ == "__main__":
    unittest.main()
