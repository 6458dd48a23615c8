"""Load/save round-trip of :class:`AliasConfig` through a :class:`FileAccess` port.

Parsing uses the standard-library :mod:`tomllib`; writing uses
``tomli_w`` since ``tomllib`` is read-only.  Neither function touches the
filesystem directly — all I/O goes through the injected port.
"""

from __future__ import annotations

import logging
import tomllib

import tomli_w

from aliasctl.core.models import AliasConfig
from aliasctl.core.protocols import FileAccess
from aliasctl.exceptions import ConfigParseError

logger = logging.getLogger(__name__)


def parse_config(text: str, *, source: str = "<string>") -> AliasConfig:
    """Parse TOML *text* into an :class:`AliasConfig`.

    Raises
    ------
    ConfigParseError
        When *text* is not valid TOML or lacks the alias tables.
    """
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(
            f"{source} is not valid TOML: {exc}",
            hint="Fix the TOML syntax, or restore the file from a backup.",
        ) from exc
    return AliasConfig.from_document(document)


def dump_config(config: AliasConfig) -> str:
    """Serialize *config* to TOML text."""
    return tomli_w.dumps(config.to_document())


def load_config(file_access: FileAccess, path: str) -> AliasConfig:
    """Read and parse the configuration at *path*."""
    text = file_access.read_text(path)
    config = parse_config(text, source=path)
    logger.debug(
        "Loaded %d general alias(es) and %d group(s) from %s",
        len(config.general),
        len(config.group or {}),
        path,
    )
    return config


def save_config(file_access: FileAccess, path: str, config: AliasConfig) -> None:
    """Overwrite *path* with the serialized *config*."""
    file_access.write_text(path, dump_config(config))
    logger.debug("Saved configuration to %s", path)
