"""Single-pass parsing of raw arguments against the flag schema."""

import argparse
import enum
import functools
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from mock_server.bootstrap.config import PROGRAM_NAME
from mock_server.options.errors import MalformedArguments
from mock_server.options.flags import FLAGS, FLAGS_BY_NAME, FlagDeclaration

HELP_WIDTH = 100


class FlagState(enum.Enum):
    """Whether a flag was supplied and whether it carried a value."""

    ABSENT = "absent"
    PRESENT_NO_VALUE = "present_no_value"
    PRESENT_WITH_VALUE = "present_with_value"


@dataclass(frozen=True)
class FlagValue:
    """Parse outcome for one declared flag."""

    state: FlagState = FlagState.ABSENT
    values: tuple[str, ...] = ()

    @property
    def present(self) -> bool:
        return self.state is not FlagState.ABSENT

    @property
    def has_value(self) -> bool:
        return self.state is FlagState.PRESENT_WITH_VALUE


ABSENT = FlagValue()


@dataclass(frozen=True)
class ParsedOptionSet:
    """Immutable view of which flags were supplied and with what values."""

    flags: Mapping[str, FlagValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        complete = {flag.name: ABSENT for flag in FLAGS}
        complete.update(self.flags)
        object.__setattr__(self, "flags", MappingProxyType(complete))

    def __hash__(self) -> int:
        # MappingProxyType is unhashable; every FlagValue is.
        return hash(tuple(self.flags.items()))

    def flag(self, name: str) -> FlagValue:
        """Return the parse outcome for a declared flag name."""
        if name not in FLAGS_BY_NAME:
            raise KeyError(f"Undeclared flag: {name}")
        return self.flags[name]

    def has(self, name: str) -> bool:
        return self.flag(name).present

    def has_argument(self, name: str) -> bool:
        return self.flag(name).has_value

    def value_of(self, name: str) -> Optional[str]:
        """Return the last value given, else the schema default, else None."""
        flag_value = self.flag(name)
        if flag_value.has_value:
            return flag_value.values[-1]
        return FLAGS_BY_NAME[name].default

    def values_of(self, name: str) -> tuple[str, ...]:
        return self.flag(name).values


class _SchemaArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str):
        raise MalformedArguments(message)


def _add_flag(parser: argparse.ArgumentParser, flag: FlagDeclaration) -> None:
    common = {
        "dest": flag.dest,
        "default": argparse.SUPPRESS,
        "help": flag.description,
    }
    if not flag.takes_value:
        parser.add_argument(flag.option_string, action="count", **common)
    elif flag.value_required:
        parser.add_argument(flag.option_string, action="append", **common)
    else:
        parser.add_argument(
            flag.option_string, action="append", nargs="?", const=None, **common
        )


@functools.lru_cache(maxsize=None)
def build_parser() -> argparse.ArgumentParser:
    """Return the argparse parser generated from the flag schema."""
    parser = _SchemaArgumentParser(
        prog=PROGRAM_NAME,
        description="Mock HTTP server",
        add_help=False,
        allow_abbrev=False,
        formatter_class=functools.partial(argparse.HelpFormatter, width=HELP_WIDTH),
    )
    for flag in FLAGS:
        _add_flag(parser, flag)
    return parser


def format_usage() -> str:
    """Return the usage text listing every flag and its description."""
    return build_parser().format_help()


def _flag_value(namespace: argparse.Namespace, flag: FlagDeclaration) -> FlagValue:
    if not hasattr(namespace, flag.dest):
        return ABSENT
    if not flag.takes_value:
        return FlagValue(FlagState.PRESENT_NO_VALUE)
    values = tuple(value for value in getattr(namespace, flag.dest) if value is not None)
    if values:
        return FlagValue(FlagState.PRESENT_WITH_VALUE, values)
    return FlagValue(FlagState.PRESENT_NO_VALUE)


def parse_arguments(argv: Sequence[str]) -> ParsedOptionSet:
    """Parse raw argument tokens, raising MalformedArguments on schema errors."""
    namespace = build_parser().parse_args(list(argv))
    return ParsedOptionSet({flag.name: _flag_value(namespace, flag) for flag in FLAGS})
