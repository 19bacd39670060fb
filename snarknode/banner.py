"""The greeting printed when a node starts."""

from __future__ import annotations

__all__ = ["welcome_message"]

_BOLD_WHITE = "\x1b[1;37m"
_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"

# Each row is a run-length description: tokens of a glyph followed by its
# repeat count, with "." standing for a space.
_LOGO_ROWS = (
    ".9 ╦1 ╬5 ╦1",
    ".8 ╬9 .20 ▄4 .8 ▄3",
    ".7 ╬11 .18 ▐1 ▓4 ▌1 .7 ▓3",
    ".6 ╬13 .16 ▐1 ▓6 ▌1 .6 ▓3 .5 ▄6 .7 ▄6",
    ".5 ╬15 .14 ▐1 ▓3 .2 ▓3 ▌1 .5 ▓3 .3 ▄1 ▓2 ▀4 ▓2 ▄1 .3 ▐1 ▓8 ▌1",
    ".4 ╬7 ╜1 .1 ╙1 ╬7 .12 ▐1 ▓3 ▌1 .2 ▐1 ▓3 ▌1 .4 ▓3 .2 ▐1 ▓3 ▄4 ▓3 ▌1 .1 ▐1 ▓3 .4 ▓3 ▌1",
    ".3 ╬6 ╣1 .5 ╠1 ╬6 .11 █1 ▓10 █1 .4 ▓3 .2 ▐1 ▓2 ▀8 ▘1 .1 ▐1 ▓3 .4 ▓3 ▌1",
    ".2 ╬6 ╣1 .7 ╠1 ╬6 .9 █1 ▓3 ▌1 .4 ▐1 ▓3 █1 .3 ▓3 .3 ▀1 ▓2 ▄4 ▓2 ▀1 .3 ▐1 ▓8 ▌1",
    ".1 ╬6 ╣1 .9 ╠1 ╬6 .7 ▝1 ▀4 .6 ▀4 ▘1 .2 ▀3 .5 ▀6 .7 ▀6",
    "╚1 ╬5 ╩1 .11 ╩1 ╬4 ╩1",
)

_GREETING = "Welcome to Aleo! We thank you for running a network node and supporting privacy.\n"


def _expand(row: str) -> str:
    return "".join(
        (" " if token[0] == "." else token[0]) * int(token[1:]) for token in row.split()
    )


_LOGO = "\n\n" + "\n".join(_expand(row) for row in _LOGO_ROWS) + "\n\n"


def welcome_message() -> str:
    """The logo in bold white followed by a bold greeting, as ANSI text."""
    return f"{_BOLD_WHITE}{_LOGO}{_RESET}{_BOLD}{_GREETING}{_RESET}"