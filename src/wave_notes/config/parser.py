"""Parser for the shell-variable style ~/.wave-notes.conf file.

Accepted line forms::

    # comment
    NOTES_DIR="$HOME/Documents/WaveNotes"
    export BIN_DIR=~/bin   # trailing comment
    BIN_DIR='/literal/$path'

Double-quoted and bare values have $VAR / ${VAR} references expanded from the
given environment; single-quoted values are taken literally.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from string import Template

from result import Err, Ok, Result

from wave_notes.common import create_logger

from .models import ConfigParseError

logger = create_logger("config")

_ASSIGNMENT = re.compile(r"^(?:export\s+)?(?P<key>[A-Za-z_][A-Za-z0-9_]*)=(?P<value>.*)$")


def parse_config_text(
    text: str,
    path: Path,
    env: Mapping[str, str],
) -> Result[dict[str, str], ConfigParseError]:
    values: dict[str, str] = {}

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        match = _ASSIGNMENT.match(line)
        if match is None:
            return Err(
                ConfigParseError(
                    path=path,
                    line=line_no,
                    message=f"Expected KEY=value assignment, got: {line}",
                )
            )

        value = _parse_value(match.group("value"), env)
        if value is None:
            return Err(
                ConfigParseError(
                    path=path,
                    line=line_no,
                    message=f"Malformed quoted value for {match.group('key')}",
                )
            )

        # Later assignments win, as when the file is sourced by a shell.
        values[match.group("key")] = value

    return Ok(values)


def _parse_value(raw: str, env: Mapping[str, str]) -> str | None:
    raw = raw.strip()
    if not raw:
        return ""

    quote = raw[0]
    if quote in ("'", '"'):
        end = raw.find(quote, 1)
        if end == -1:
            return None
        rest = raw[end + 1 :].strip()
        if rest and not rest.startswith("#"):
            return None
        inner = raw[1:end]
        return inner if quote == "'" else expand_variables(inner, env)

    value = raw.split(" #", 1)[0].strip()
    return expand_variables(value, env)


def expand_variables(value: str, env: Mapping[str, str]) -> str:
    """Expand $VAR, ${VAR} and a leading ~ the way a POSIX shell would.

    Unset variables expand to an empty string and are logged as a warning.
    """
    if value == "~" or value.startswith("~/"):
        home = env.get("HOME")
        if home:
            value = home + value[1:]

    template = Template(value)
    names = {
        match.group("named") or match.group("braced")
        for match in template.pattern.finditer(value)
        if match.group("named") or match.group("braced")
    }
    unset = sorted(name for name in names if name not in env)
    if unset:
        logger.warning("Unset variables {variables} expand to empty strings", variables=unset, value=value)
    return template.safe_substitute({name: env.get(name, "") for name in names})
