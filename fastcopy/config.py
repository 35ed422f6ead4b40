"""Configuration for fastcopy and its command-line flags."""

from __future__ import annotations

import argparse
import types
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from fastcopy.alphabet import DEFAULT_ALPHABET, AlphabetError, parse_alphabet

DEFAULT_REGEXES: Mapping[str, str] = types.MappingProxyType(
    {
        "ipv4": r"\b\d{1,3}(?:\.\d{1,3}){3}\b",
        "gitsha": r"\b[0-9a-f]{7,40}\b",
        "hexaddr": r"(?i)\b0x[0-9a-f]{2,}\b",
        "hexcolor": r"(?i)#(?:[0-9a-f]{3}|[0-9a-f]{6})\b",
        "int": r"(?:-?|\b)\d{4,}\b",
        "path": r"(?:[^\w\-\.~/]|\A)(([\w\-\.]+|~)?(/[\w\-\.]+){2,})\b",
        "uuid": r"(?i)\b[0-9a-f]{8}(?:-[0-9a-f]{4}){3}-[0-9a-f]{12}\b",
        "isodate": r"\d{4}-\d{2}-\d{2}",
    }
)


class ConfigError(ValueError):
    """Raised when command-line flags cannot be parsed."""


class Regexes(dict[str, str]):
    """Map from regex name to body. An empty body disables that regex."""

    def put(self, name: str, regex: str) -> None:
        """Set the regex for name; the name must not be empty."""
        if not name:
            raise ValueError("regex must have a name")
        self[name] = regex

    def set(self, value: str) -> None:
        """Add a regex given in the form NAME:REGEX."""
        name, sep, regex = value.partition(":")
        if not sep:
            raise ValueError("regex flags must be in the form NAME:REGEX")
        self.put(name, regex)

    def flags(self) -> list[str]:
        """Command-line arguments that rebuild these regexes, sorted by name."""
        return [f"-regex={name}:{self[name]}" for name in sorted(self)]

    def fill_from(self, other: Mapping[str, str]) -> None:
        """Add entries from other whose names are not already present."""
        for name, regex in other.items():
            if name not in self:
                self.put(name, regex)


@dataclass
class Config:
    """Settings for a fastcopy run."""

    pane: str = ""
    action: str = ""
    shift_action: str = ""
    alphabet: str = ""
    verbose: bool = False
    regexes: Regexes = field(default_factory=Regexes)
    tmux: str = ""
    log_file: str = ""

    def fill_from(self, other: Config) -> None:
        """Fill unset values from other without overwriting set ones."""
        self.pane = self.pane or other.pane
        self.action = self.action or other.action
        self.shift_action = self.shift_action or other.shift_action
        self.alphabet = self.alphabet or other.alphabet
        self.log_file = self.log_file or other.log_file
        self.tmux = self.tmux or other.tmux
        self.regexes.fill_from(other.regexes)
        self.verbose = self.verbose or other.verbose

    def flags(self) -> list[str]:
        """Arguments from which parse_flags rebuilds this configuration.

        Values are attached with '=' so that they may begin with '-'.
        """
        args: list[str] = []
        if self.pane:
            args.append(f"-pane={self.pane}")
        if self.action:
            args.append(f"-action={self.action}")
        if self.shift_action:
            args.append(f"-shift-action={self.shift_action}")
        if self.alphabet:
            args.append(f"-alphabet={self.alphabet}")
        args.extend(self.regexes.flags())
        if self.verbose:
            args.append("-verbose")
        if self.log_file:
            args.append(f"-log={self.log_file}")
        if self.tmux:
            args.append(f"-tmux={self.tmux}")
        return args


def default_config(cfg: Config) -> Config:
    """Build the default configuration for cfg's tmux executable."""
    return Config(
        action=f"{cfg.tmux} load-buffer -",
        alphabet=DEFAULT_ALPHABET,
        regexes=Regexes(DEFAULT_REGEXES),
    )


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise ConfigError(message)


class _AlphabetAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        try:
            setattr(namespace, self.dest, parse_alphabet(values))
        except AlphabetError as exc:
            raise argparse.ArgumentError(self, str(exc)) from exc


class _RegexAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        regexes = getattr(namespace, self.dest, None)
        if regexes is None:
            regexes = Regexes()
            setattr(namespace, self.dest, regexes)
        try:
            regexes.set(values)
        except ValueError as exc:
            raise argparse.ArgumentError(self, str(exc)) from exc


def _option(name: str) -> Iterable[str]:
    return (f"-{name}", f"--{name}")


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for fastcopy's flags; errors raise ConfigError."""
    parser = _Parser(prog="tmux-fastcopy", add_help=False, allow_abbrev=False)
    parser.add_argument(*_option("pane"), dest="pane", default="")
    parser.add_argument(*_option("action"), dest="action", default="")
    parser.add_argument(*_option("shift-action"), dest="shift_action", default="")
    parser.add_argument(
        *_option("alphabet"), dest="alphabet", default="", action=_AlphabetAction
    )
    parser.add_argument(*_option("regex"), dest="regexes", default=None, action=_RegexAction)
    parser.add_argument(*_option("verbose"), dest="verbose", action="store_true")
    parser.add_argument(*_option("log"), dest="log_file", default="")
    parser.add_argument(*_option("tmux"), dest="tmux", default="tmux")
    return parser


def parse_flags(argv: Sequence[str]) -> Config:
    """Parse command-line arguments into a Config."""
    ns = build_parser().parse_args(list(argv))
    return Config(
        pane=ns.pane,
        action=ns.action,
        shift_action=ns.shift_action,
        alphabet=ns.alphabet,
        verbose=ns.verbose,
        regexes=ns.regexes if ns.regexes is not None else Regexes(),
        tmux=ns.tmux,
        log_file=ns.log_file,
    )