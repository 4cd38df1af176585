"""
백업 실행기 단위 테스트
"""

import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from config.constants import (
    DeletionStatus,
    DeploymentObjectType,
    ExportMethod,
    IncludeSecurity,
)
from recycle_bin.core.configuration import XmlConfigProvider
from recycle_bin.core.models import DeletionProperties
from recycle_bin.executor import BackupExecutor
from recycle_bin.naming import BackupPathResolver
from tests.fakes import InMemoryPlatform, backup_error, write_configuration

HOST = "https://portal"


class TestBackupExecutor(unittest.TestCase):
    """백업 실행기 테스트"""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        tmp = Path(self._tmp.name)
        self.backup_folder = tmp / "Backups"
        provider = XmlConfigProvider(write_configuration(tmp, self.backup_folder))
        self.platform = InMemoryPlatform()
        self.platform.add_collection(
            HOST, "/sites/finance", ["teamA", "teamB", "teamB/reports"]
        )
        resolver = BackupPathResolver(
            provider, clock=lambda: datetime(2024, 1, 1, 10, 15, 30, 42000)
        )
        self.executor = BackupExecutor(self.platform, resolver)

    def tearDown(self):
        self._tmp.cleanup()

    def _properties(self, srel: str) -> DeletionProperties:
        return DeletionProperties(
            full_url=f"{HOST}{srel}",
            server_relative_url=srel,
            user_login_name="CONTOSO\\alice",
            web_name=srel.rsplit("/", 1)[-1],
            web_url=f"{HOST}{srel}",
        )

    def test_collection_backup_under_elevation(self):
        """사이트 모음 백업은 권한 상승 범위에서 덮어쓰기 허용으로 실행"""
        outcome = self.executor.backup_collection(self._properties("/sites/finance"))

        self.assertEqual(outcome.status, DeletionStatus.ALLOW)
        backup = self.platform.backups[0]
        self.assertEqual(backup["url"], f"{HOST}/sites/finance")
        self.assertEqual(
            backup["path"], self.backup_folder / "Sites" / "sites" / "finance.bak"
        )
        self.assertTrue(backup["overwrite"])
        self.assertTrue(backup["include_all"])
        self.assertEqual(self.platform.unelevated_calls, [])
        self.assertFalse(self.platform.elevated)

    def test_leaf_container_export_settings(self):
        """리프 사이트 내보내기 설정"""
        outcome = self.executor.backup_container(
            self._properties("/sites/finance/teamA")
        )

        self.assertTrue(outcome.is_allowed)
        settings = self.platform.exports[0]
        self.assertEqual(settings.export_method, ExportMethod.EXPORT_ALL)
        self.assertEqual(settings.base_file_name, "teamA.bak")
        self.assertEqual(settings.file_location, str(self.backup_folder / "sites" / "finance"))
        self.assertFalse(settings.exclude_dependencies)
        self.assertEqual(settings.include_security, IncludeSecurity.ALL)
        self.assertEqual(settings.site_url, f"{HOST}/sites/finance/teamA")
        self.assertEqual(len(settings.export_objects), 1)
        export_object = settings.export_objects[0]
        self.assertEqual(export_object.type, DeploymentObjectType.WEB)
        self.assertEqual(export_object.url, f"{HOST}/sites/finance/teamA")
        self.assertTrue(export_object.exclude_children)
        self.assertEqual(self.platform.unelevated_calls, [])

    def test_non_root_container_with_children_is_skipped(self):
        """하위 사이트가 있는 사이트는 내보내지 않고 허용"""
        outcome = self.executor.backup_container(
            self._properties("/sites/finance/teamB")
        )

        self.assertTrue(outcome.is_allowed)
        self.assertIsNone(outcome.destination)
        self.assertEqual(self.platform.exports, [])
        self.assertFalse((self.backup_folder / "sites").exists())
        self.assertIn(f"{HOST}/sites/finance/teamB", self.platform.closed)
        self.assertFalse(self.platform.elevated)

    def test_container_handle_is_closed_after_export(self):
        self.executor.backup_container(self._properties("/sites/finance/teamA"))

        self.assertIn(f"{HOST}/sites/finance/teamA", self.platform.closed)

    def test_backup_error_becomes_cancel(self):
        """백업 엔진 오류는 Cancel 로 변환"""
        self.platform.backup_failure = backup_error("disk full")

        outcome = self.executor.backup_collection(self._properties("/sites/finance"))

        self.assertTrue(outcome.is_cancelled)
        self.assertTrue(
            outcome.reason.startswith("The backup operation terminated abnormally due to")
        )
        self.assertIn("disk full", outcome.reason)
        self.assertIs(outcome.error, self.platform.backup_failure)
        self.assertFalse(self.platform.elevated)

    def test_export_error_becomes_cancel(self):
        self.platform.export_failure = backup_error("export engine stopped")

        outcome = self.executor.backup_container(
            self._properties("/sites/finance/teamA")
        )

        self.assertTrue(outcome.is_cancelled)
        self.assertIn("export engine stopped", outcome.reason)

    def test_unexpected_error_propagates_and_reverts(self):
        """알 수 없는 오류는 전파하고 권한은 복귀"""
        self.platform.export_failure = RuntimeError("unexpected")

        with self.assertRaises(RuntimeError):
            self.executor.backup_container(self._properties("/sites/finance/teamA"))

        self.assertFalse(self.platform.elevated)
        self.assertEqual(self.platform.reverts, 1)


if __name__ == "__main__":
    unittest.main()
