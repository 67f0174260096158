"""Command-line interface: ``dewpoint TEMPERATURE HUMIDITY``."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Mapping, Sequence

from .config import PROG, measurement_locale
from .errors import DewPointError, InternalError, InvalidTemperatureError, UsageError
from .logs import configure_logging
from .metrics import dew_point_c, dew_point_f
from .parsing import parse_humidity, parse_temperature, read_float
from .state import CELSIUS_FLAG, FAHRENHEIT_FLAG, Invocation, fold_unit_flags
from .units import locale_uses_fahrenheit, scale_name

LOGGER = logging.getLogger("dew_point.cli")

SHORT_USAGE = f"Usage: {PROG} TEMPERATURE HUMIDITY\n"

HELP = """\
Compute the dew point from a given temperature and humidity. Temperatures are
interpreted by default according to the current locale; humidity is interpreted
as a percentage.

Options:
      -c, --celsius, --centigrade
                              use the Celsius temperature scale
      -f, --fahrenheit        use the Fahrenheit temperature scale
      --help                  display this help and exit
"""

ASK_FOR_HELP = f"Try '{PROG} --help' for more information\n"

#: Long option spellings and the option each one stands for.
LONG_OPTIONS = {
    "--celsius": "--celsius",
    "--centigrade": "--celsius",
    "--fahrenheit": "--fahrenheit",
    "--help": "--help",
}


class HelpRequested(Exception):
    """Raised as soon as ``--help`` is seen on the command line."""


class _HelpAction(argparse.Action):
    """Stops parsing at ``--help`` so later arguments cannot turn it into an error."""

    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        raise HelpRequested()


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)

    def _parse_optional(self, arg_string):
        # Any number, including -1e1 or -0x10, is an operand rather than an option.
        if arg_string.startswith("-") and read_float(arg_string) is not None:
            return None
        return super()._parse_optional(arg_string)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument(
        "-c",
        "--celsius",
        "--centigrade",
        dest="unit_flags",
        action="append_const",
        const=CELSIUS_FLAG,
    )
    parser.add_argument(
        "-f",
        "--fahrenheit",
        dest="unit_flags",
        action="append_const",
        const=FAHRENHEIT_FLAG,
    )
    parser.add_argument("--help", action=_HelpAction, default=argparse.SUPPRESS)
    parser.add_argument("operands", nargs="*")
    return parser


def expand_long_options(argv: Sequence[str]) -> list[str]:
    """Resolve long-option prefixes the way getopt_long does.

    A prefix is ambiguous only when it matches spellings of different options,
    so ``--c`` means ``--celsius`` even though ``--centigrade`` also matches.
    """
    expanded: list[str] = []
    for position, arg in enumerate(argv):
        if arg == "--":
            expanded.extend(argv[position:])
            break
        if arg.startswith("--") and "=" not in arg and arg not in LONG_OPTIONS:
            matches = {option for name, option in LONG_OPTIONS.items() if name.startswith(arg)}
            if len(matches) > 1:
                raise UsageError(f"option '{arg}' is ambiguous; possibilities: {' '.join(sorted(matches))}")
            if matches:
                arg = matches.pop()
        expanded.append(arg)
    return expanded


def parse_invocation(argv: Sequence[str], locale: str) -> Invocation:
    """Turn process arguments into a validated Invocation.

    Options may be mixed with the operands.  Raises HelpRequested for
    ``--help`` and UsageError for bad options or a wrong operand count.
    """
    namespace = build_parser().parse_intermixed_args(expand_long_options(list(argv)))
    operands = namespace.operands
    if len(operands) != 2:
        raise UsageError(show_usage=True)

    uses_fahrenheit = locale_uses_fahrenheit(locale)
    initial = Invocation(
        measurement_locale=locale,
        locale_uses_fahrenheit=uses_fahrenheit,
        use_fahrenheit=uses_fahrenheit,
        temperature=operands[0],
        humidity=operands[1],
    )
    return fold_unit_flags(initial, namespace.unit_flags or ())


def render_help(locale: str) -> str:
    return (
        SHORT_USAGE
        + HELP
        + f"\nYour current measurement locale is {locale}, which uses "
        + f"{scale_name(locale_uses_fahrenheit(locale))} by\ndefault.\n"
    )


def render_error(exc: DewPointError) -> str:
    parts = []
    if exc.show_usage:
        parts.append(SHORT_USAGE)
    if exc.message:
        prefix = f"{PROG}: " if exc.prefixed else ""
        parts.append(f"{prefix}{exc.message}\n")
    if exc.show_hint:
        parts.append(ASK_FOR_HELP)
    return "".join(parts)


def compute(invocation: Invocation) -> float:
    temperature = parse_temperature(invocation.temperature)
    humidity = parse_humidity(invocation.humidity)
    formula = dew_point_f if invocation.use_fahrenheit else dew_point_c
    try:
        dew_point = formula(temperature, humidity)
    except ZeroDivisionError:
        dew_point = math.nan
    # Temperatures at or beyond the formula's poles have no printable dew point.
    if not math.isfinite(dew_point):
        LOGGER.debug("No finite dew point for %r at %r%%", invocation.temperature, invocation.humidity)
        raise InvalidTemperatureError(invocation.temperature)
    return dew_point


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """Run one calculation and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    locale = measurement_locale(environ)
    LOGGER.debug("Measurement locale %s (%s default)", locale, scale_name(locale_uses_fahrenheit(locale)))

    try:
        invocation = parse_invocation(argv, locale)
        dew_point = compute(invocation)
    except HelpRequested:
        sys.stdout.write(render_help(locale))
        return 0
    except DewPointError as exc:
        if isinstance(exc, InternalError):
            LOGGER.error("Internal error: %s", exc.detail)
        sys.stderr.write(render_error(exc))
        return 1

    LOGGER.debug(
        "Dew point %.3f %s for %s at %s%%",
        dew_point,
        scale_name(invocation.use_fahrenheit),
        invocation.temperature,
        invocation.humidity,
    )
    print(round(dew_point))
    return 0


def run():
    """Console-script entry point."""
    configure_logging()
    sys.exit(main())
