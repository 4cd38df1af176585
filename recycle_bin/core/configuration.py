"""
설정 문서 조회 모듈

고정 위치의 XML 설정 문서(Configuration.xml)에서 키 값을 읽습니다.
키는 `//backupFolder` 같은 XPath 형식입니다.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from config.constants import CONFIG_KEYS, MESSAGES
from config.settings import get_recycle_bin_config
from recycle_bin.core.error_handling import ConfigurationError


class XmlConfigProvider:
    """XML 설정 문서 조회기

    문서는 조회할 때마다 다시 읽으므로 배포 중 변경된 값이 바로 반영됩니다.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path or get_recycle_bin_config().config_path)
        self.logger = logging.getLogger(__name__)

    def _load(self) -> ET.Element:
        try:
            return ET.parse(self.config_path).getroot()
        except (ET.ParseError, OSError) as e:
            raise ConfigurationError(
                MESSAGES["configuration_exception"].format(e), cause=e
            ) from e

    @staticmethod
    def _to_element_path(key_name: str) -> str:
        # ElementTree 는 상대 경로만 허용
        if key_name.startswith("//"):
            return f".{key_name}"
        if key_name.startswith("/"):
            return f".{key_name}"
        return key_name

    def get_config_value(self, key_name: str) -> str:
        """
        키에 해당하는 노드와 하위 노드의 텍스트를 이어 붙여 반환

        Raises:
            ConfigurationError: 문서가 없거나 키가 없는 경우
        """
        root = self._load()
        element_path = self._to_element_path(key_name)
        tag = element_path.rsplit("/", 1)[-1]

        node = root if root.tag == tag else root.find(element_path)
        if node is None:
            raise ConfigurationError(
                MESSAGES["configuration_exception"].format(
                    f"{key_name} not found in {self.config_path}"
                ),
                config_key=key_name,
            )

        value = "".join(node.itertext()).strip()
        self.logger.debug(f"설정 조회: {key_name}={value}")
        return value

    def get_int(self, key_name: str) -> int:
        """정수 설정 조회"""
        raw = self.get_config_value(key_name)
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigurationError(
                MESSAGES["configuration_exception"].format(
                    f"{key_name} is not an integer: {raw!r}"
                ),
                config_key=key_name,
                cause=e,
            ) from e

    @property
    def backup_folder(self) -> str:
        """백업 루트 폴더 (비어 있으면 ConfigurationError)"""
        key_name = CONFIG_KEYS["backup_folder"]
        value = self.get_config_value(key_name)
        if not value:
            raise ConfigurationError(
                MESSAGES["configuration_exception"].format(
                    f"{key_name} is empty in {self.config_path}"
                ),
                config_key=key_name,
            )
        return value

    @property
    def assembly_name(self) -> str:
        return self.get_config_value(CONFIG_KEYS["assembly_name"])

    @property
    def sequence_number(self) -> int:
        return self.get_int(CONFIG_KEYS["sequence_number"])
