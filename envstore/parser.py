"""Parser for the ``.env`` definition file."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv.parser import parse_stream
from dotenv.variables import parse_variables

from .exceptions import SourceNotFoundError, SourceParseError

logger = logging.getLogger(__name__)


class SourceParser:
    """Read ``KEY=VALUE`` pairs from a definition file in file order.

    The statement grammar (comments, ``export`` prefixes, quoting and
    ``${VAR}`` / ``${VAR:-default}`` expansion) is the one python-dotenv
    implements. References resolve against keys defined earlier in the same
    file only; the process environment is not consulted.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        """Initialize the parser.

        Args:
            path: Location of the definition file
            encoding: Text encoding used to read it
        """
        self.path = Path(path)
        self.encoding = encoding

    def parse(self) -> dict[str, str]:
        """Parse the definition file.

        Returns:
            Mapping of keys to string values, in file order

        Raises:
            SourceNotFoundError: If the file does not exist
            SourceParseError: If the file cannot be decoded, or a statement is
                malformed or has no value
        """
        if not self.path.is_file():
            raise SourceNotFoundError(self.path)

        try:
            with open(self.path, "r", encoding=self.encoding) as stream:
                values = self._read_bindings(stream)
        except UnicodeDecodeError as exc:
            raise SourceParseError(self.path, None, str(exc)) from exc

        logger.debug(f"Parsed {len(values)} variables from {self.path}")
        return values

    def _read_bindings(self, stream) -> dict[str, str]:
        values: dict[str, str] = {}
        for binding in parse_stream(stream):
            if binding.error:
                raise SourceParseError(
                    self.path,
                    binding.original.line,
                    binding.original.string.strip(),
                )
            if binding.key is None:
                continue
            if binding.value is None:
                # Bare "KEY" lines carry no value to load
                raise SourceParseError(
                    self.path,
                    binding.original.line,
                    binding.original.string.strip(),
                )
            values[binding.key] = expand_variables(binding.value, values)
        return values


def expand_variables(value: str, defined: dict[str, str]) -> str:
    """Substitute ``${NAME}`` references with values defined so far.

    Unknown names fall back to their ``:-`` default, or to an empty string.
    """
    return "".join(atom.resolve(defined) for atom in parse_variables(value))


def parse_env_file(path: str | Path, encoding: str = "utf-8") -> dict[str, str]:
    """Shortcut for ``SourceParser(path, encoding).parse()``."""
    return SourceParser(path, encoding=encoding).parse()
