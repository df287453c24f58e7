"""Create the wanderer-conf.env file from its template and rotate its secrets."""
from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .config import get_settings
from .envfile import EnvFile
from .errors import BootstrapError, DuplicateKeyError, NotFoundError, NotReadableError, NotWritableError
from .keys import MANAGED_KEYS, ManagedKey, decoded_length, generate_key

logger = logging.getLogger(__name__)

OK = "ok"
MISSING = "missing"
PLACEHOLDER = "placeholder"
MALFORMED = "malformed"
DUPLICATE = "duplicate"


@dataclass(frozen=True)
class KeyStatus:
    """Result of checking one managed key in the config file."""

    key: ManagedKey
    state: str

    @property
    def is_ok(self) -> bool:
        return self.state == OK


class ConfigBootstrapper:
    """Operations over a single config file and the template it is created from."""

    def __init__(
        self,
        template_path: Optional[Path] = None,
        config_path: Optional[Path] = None,
        managed_keys: Iterable[ManagedKey] = MANAGED_KEYS,
    ) -> None:
        settings = get_settings()
        self.template_path = Path(template_path or settings.TEMPLATE_PATH)
        self.config_path = Path(config_path or settings.CONFIG_PATH)
        self.managed_keys = tuple(managed_keys)

    def initialize_config(self, overwrite: bool = True) -> bool:
        """
        Copy the template over the config path.

        Like ``cp``, an existing config file is overwritten unless ``overwrite``
        is False, in which case it is left untouched and False is returned.
        """
        if not overwrite and self.config_path.exists():
            logger.info("%s already exists. No changes made.", self.config_path)
            return False

        if not self.template_path.is_file():
            raise NotFoundError(self.template_path, "template")

        try:
            shutil.copyfile(self.template_path, self.config_path)
        except shutil.SameFileError as exc:
            raise BootstrapError(f"template and config are the same file: {self.config_path}") from exc
        except IsADirectoryError as exc:
            raise NotWritableError(self.config_path, "is a directory") from exc
        except PermissionError as exc:
            raise NotWritableError(self.config_path) from exc
        except FileNotFoundError as exc:
            raise NotFoundError(self.config_path.parent, "directory") from exc

        logger.info("Created %s from %s", self.config_path, self.template_path)
        return True

    def rotate_key(self, key_name: str, byte_length: int) -> str:
        """
        Replace the ``key_name=`` line with a fresh base64 value of ``byte_length`` bytes.

        A missing or duplicated key raises before anything is written, so the
        file is left unchanged. Returns the new value.
        """
        env = EnvFile.load(self.config_path)
        value = generate_key(byte_length)
        env.replace(key_name, value).save()
        logger.info("Rotated %s in %s", key_name, self.config_path)
        return value

    def rotate(self, key: ManagedKey) -> str:
        return self.rotate_key(key.name, key.byte_length)

    def check(self) -> list[KeyStatus]:
        """Report whether each managed key holds a usable value."""
        env = EnvFile.load(self.config_path)
        template = self._load_template()

        statuses = []
        for key in self.managed_keys:
            value = env.get(key.name)
            if value is None:
                state = MISSING
            elif len(env.find(key.name)) > 1:
                state = DUPLICATE
            elif not value or (template is not None and value == template.get(key.name)):
                state = PLACEHOLDER
            elif decoded_length(value) != key.byte_length:
                state = MALFORMED
            else:
                state = OK
            statuses.append(KeyStatus(key, state))
        return statuses

    def setup(self, overwrite: bool = False) -> list[str]:
        """
        Create the config if needed, then rotate every key still at its placeholder.

        A duplicated managed key raises before any key is rotated.
        """
        self.initialize_config(overwrite=overwrite)
        statuses = self.check()

        for status in statuses:
            if status.state == DUPLICATE:
                count = len(EnvFile.load(self.config_path).find(status.key.name))
                raise DuplicateKeyError(status.key.name, count, self.config_path)

        rotated = []
        for status in statuses:
            if status.state == PLACEHOLDER:
                self.rotate(status.key)
                rotated.append(status.key.name)
            elif status.state != OK:
                logger.warning("%s is %s in %s; leaving it alone", status.key.name, status.state, self.config_path)
        return rotated

    def _load_template(self) -> Optional[EnvFile]:
        try:
            return EnvFile.load(self.template_path)
        except (NotFoundError, NotReadableError):
            logger.debug("Template %s not readable; skipping placeholder comparison", self.template_path)
            return None
