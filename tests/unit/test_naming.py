"""
백업 경로 결정 단위 테스트
"""

import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from config.constants import ContainerTier
from recycle_bin.core.configuration import XmlConfigProvider
from recycle_bin.core.error_handling import ConfigurationError, FileSystemError
from recycle_bin.naming import (
    BackupPathResolver,
    collection_stem,
    format_disambiguator,
    parent_segment,
)
from tests.fakes import write_configuration

FIXED_MOMENT = datetime(2024, 1, 1, 10, 15, 30, 42000)


class TestNamingHelpers(unittest.TestCase):
    """경로 계산 함수 테스트"""

    def test_disambiguator_format(self):
        self.assertEqual(format_disambiguator(FIXED_MOMENT), "(2024-01-01-10-15-30-042)")

    def test_disambiguator_uses_twelve_hour_clock(self):
        moment = datetime(2024, 3, 5, 22, 7, 9, 5000)
        self.assertEqual(format_disambiguator(moment), "(2024-03-05-10-07-09-005)")

    def test_collection_stem_strips_leading_separator(self):
        self.assertEqual(
            Path(collection_stem("/sites/finance")), Path("sites") / "finance"
        )

    def test_collection_stem_for_root_collection(self):
        self.assertEqual(collection_stem("/", "https://portal/"), "portal")

    def test_parent_segment(self):
        self.assertEqual(parent_segment("/sites/finance/teamA"), "/sites/finance")
        self.assertEqual(parent_segment("/teamA"), "")


class TestBackupPathResolver(unittest.TestCase):
    """백업 경로 결정기 테스트"""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.backup_folder = self.tmp / "Backups"
        self.provider = XmlConfigProvider(write_configuration(self.tmp, self.backup_folder))
        self.resolver = BackupPathResolver(self.provider, clock=lambda: FIXED_MOMENT)

    def tearDown(self):
        self._tmp.cleanup()

    def test_collection_destination(self):
        """사이트 모음: Sites 하위에 서버 상대 경로"""
        destination = self.resolver.resolve(
            ContainerTier.COLLECTION, "/sites/finance", url="https://portal/sites/finance"
        )

        self.assertEqual(
            destination.path, self.backup_folder / "Sites" / "sites" / "finance.bak"
        )
        self.assertTrue(destination.path.parent.is_dir())

    def test_container_destination(self):
        """사이트: 상위 경로 폴더에 리프 이름"""
        destination = self.resolver.resolve(
            ContainerTier.CONTAINER, "/sites/finance/teamA", name="teamA"
        )

        self.assertEqual(destination.folder, self.backup_folder / "sites" / "finance")
        self.assertEqual(destination.file_name, "teamA.bak")
        self.assertTrue(destination.folder.is_dir())

    def test_container_name_defaults_to_leaf(self):
        destination = self.resolver.resolve(ContainerTier.CONTAINER, "/sites/finance/teamB")

        self.assertEqual(destination.stem, "teamB")

    def test_existing_file_gets_disambiguator(self):
        """이미 있는 파일은 덮어쓰지 않고 이름 변경"""
        first = self.resolver.resolve(
            ContainerTier.CONTAINER, "/sites/finance/teamA", name="teamA"
        )
        first.path.write_bytes(b"previous backup")

        second = self.resolver.resolve(
            ContainerTier.CONTAINER, "/sites/finance/teamA", name="teamA"
        )

        self.assertNotEqual(first.stem, second.stem)
        self.assertEqual(second.file_name, "teamA(2024-01-01-10-15-30-042).bak")
        self.assertEqual(second.folder, first.folder)

    def test_destination_is_recomputed_per_call(self):
        one = self.resolver.resolve(ContainerTier.CONTAINER, "/sites/a/x", name="x")
        two = self.resolver.resolve(ContainerTier.CONTAINER, "/sites/b/y", name="y")

        self.assertNotEqual(one.folder, two.folder)

    def test_empty_backup_folder_is_configuration_error(self):
        provider = XmlConfigProvider(write_configuration(self.tmp, ""))
        resolver = BackupPathResolver(provider)

        with self.assertRaises(ConfigurationError):
            resolver.resolve(ContainerTier.CONTAINER, "/sites/finance/teamA")

    def test_directory_creation_failure_is_filesystem_error(self):
        """디렉토리 자리에 파일이 있으면 FileSystemError"""
        (self.backup_folder).mkdir(parents=True)
        (self.backup_folder / "sites").write_bytes(b"not a directory")

        with self.assertRaises(FileSystemError):
            self.resolver.resolve(
                ContainerTier.CONTAINER, "/sites/finance/teamA", name="teamA"
            )


if __name__ == "__main__":
    unittest.main()
