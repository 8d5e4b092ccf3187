"""Compact range notation for register and element names.

A name may embed one or more range groups that stand for a family of
related names:

    AIN#(0:3)          -> AIN0, AIN1, AIN2, AIN3
    DAC#(0:6:2)        -> DAC0, DAC2, DAC4, DAC6
    FIO#(3:1)          -> FIO3, FIO2, FIO1
    DIO_EF_#(A,B)      -> DIO_EF_A, DIO_EF_B
    ain-#(0:1)-#(x,y)  -> ain-0-x, ain-0-y, ain-1-x, ain-1-y

Ranges are inclusive. With several groups the left-most group varies
slowest. `#pip` is rendered as a literal `|`. A name without any group
expands to itself.
"""

import itertools
import logging

from switchboard.exceptions import ExpansionMismatchError, RangeNotationError

logger = logging.getLogger(__name__)

GROUP_OPEN = "#("
GROUP_CLOSE = ")"
PIPE_TOKEN = "#pip"


def has_range_notation(pattern: str) -> bool:
    """Return True if the name contains anything that expansion would rewrite."""
    return GROUP_OPEN in pattern or PIPE_TOKEN in pattern


def _expand_numeric(pattern: str, body: str) -> list[str]:
    parts = [part.strip() for part in body.split(":")]
    if len(parts) not in (2, 3):
        raise RangeNotationError(pattern, f"expected start:end or start:end:step, got '{body}'")

    try:
        start, end = int(parts[0]), int(parts[1])
        step = int(parts[2]) if len(parts) == 3 else 1
    except ValueError:
        raise RangeNotationError(pattern, f"range bounds must be integers, got '{body}'") from None

    if step <= 0:
        raise RangeNotationError(pattern, "range step must be a positive integer")

    if start <= end:
        values = range(start, end + 1, step)
    else:
        values = range(start, end - 1, -step)
    return [str(value) for value in values]


def _expand_enumerated(pattern: str, body: str) -> list[str]:
    items = [item.strip() for item in body.split(",")]
    if any(not item for item in items):
        raise RangeNotationError(pattern, f"enumerated range has an empty item: '{body}'")
    return items


def _expand_group(pattern: str, body: str) -> list[str]:
    if not body.strip():
        raise RangeNotationError(pattern, "empty range group")
    if ":" in body:
        return _expand_numeric(pattern, body)
    return _expand_enumerated(pattern, body)


def expand_name(pattern: str) -> list[str]:
    """
    Expand a name containing range notation into the concrete names it denotes.

    Args:
        pattern: Register or element name, possibly with range groups

    Returns:
        Concrete names in declared order (no reordering, no deduplication)

    Raises:
        RangeNotationError: If a group is unclosed or malformed
    """
    pieces: list[list[str]] = []
    pos = 0
    while True:
        start = pattern.find(GROUP_OPEN, pos)
        if start == -1:
            pieces.append([pattern[pos:]])
            break

        end = pattern.find(GROUP_CLOSE, start)
        if end == -1:
            raise RangeNotationError(pattern, "unclosed range group")

        pieces.append([pattern[pos:start]])
        pieces.append(_expand_group(pattern, pattern[start + len(GROUP_OPEN):end]))
        pos = end + len(GROUP_CLOSE)

    return ["".join(combo).replace(PIPE_TOKEN, "|") for combo in itertools.product(*pieces)]


def expand_pair(binding_pattern: str, template_pattern: str) -> list[tuple[str, str]]:
    """
    Expand a register pattern and an element pattern into positional pairs.

    The i-th register name is paired with the i-th element name.

    Raises:
        RangeNotationError: If either pattern is malformed
        ExpansionMismatchError: If the two patterns expand to different lengths
    """
    bindings = expand_name(binding_pattern)
    templates = expand_name(template_pattern)

    if len(bindings) != len(templates):
        raise ExpansionMismatchError(binding_pattern, template_pattern, len(bindings), len(templates))

    if len(bindings) > 1:
        logger.debug(f"Expanded {binding_pattern} / {template_pattern} into {len(bindings)} pairs")
    return list(zip(bindings, templates))
