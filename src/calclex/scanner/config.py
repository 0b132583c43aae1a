# Copyright 2026 calclex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner configuration and its YAML file loader."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".calclex.yaml"


class ScannerConfigError(Exception):
    """Raised when a scanner configuration file is invalid or cannot be loaded."""


class EndOfInput(enum.Enum):
    """What the scanner does when asked for a line past the last stored one."""

    EMPTY = "empty"
    RAISE = "raise"


@dataclass(frozen=True)
class ScannerConfig:
    """Settings for a :class:`~calclex.scanner.lexer.Scanner`.

    Attributes:
        end_of_input: Behaviour of ``next_line()`` once all lines were produced.
            ``EMPTY`` keeps returning ``[Empty()]``; ``RAISE`` raises
            :class:`~calclex.scanner.lexer.EndOfInputError`.
    """

    end_of_input: EndOfInput = EndOfInput.EMPTY


def load_scanner_config(path: Path) -> ScannerConfig:
    """Load and parse a scanner configuration file.

    Args:
        path: Path to the YAML configuration file (usually ``.calclex.yaml``).

    Returns:
        A ScannerConfig populated from the file.

    Raises:
        ScannerConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ScannerConfigError(f"Scanner config file not found: {path}") from None
    except OSError as exc:
        raise ScannerConfigError(f"Cannot read scanner config file: {exc}") from exc

    logger.debug("Loading scanner config from %s", path)
    return parse_scanner_config(text, source_label=str(path))


def parse_scanner_config(text: str, source_label: str = "<string>") -> ScannerConfig:
    """Parse scanner config YAML text into a ScannerConfig.

    An empty document yields the default configuration.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ScannerConfigError: If the YAML is invalid or holds unexpected values.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ScannerConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ScannerConfig()
    if not isinstance(data, dict):
        raise ScannerConfigError(f"{source_label}: scanner config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ScannerConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    if "end-of-input" not in data:
        return ScannerConfig()
    return ScannerConfig(end_of_input=_parse_end_of_input(data["end-of-input"], source_label))


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"end-of-input"})


def _parse_end_of_input(value: object, source_label: str) -> EndOfInput:
    """Map the raw 'end-of-input' value onto an EndOfInput member."""
    if not isinstance(value, str):
        raise ScannerConfigError(f"{source_label}: 'end-of-input' must be a string")
    try:
        return EndOfInput(value.strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in EndOfInput)
        raise ScannerConfigError(
            f"{source_label}: invalid 'end-of-input' value {value!r} (expected one of: {choices})"
        ) from None
