from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from pyfa.core.errors import ParseWarning
from pyfa.core.types import State, TransitionRecord

logger = logging.getLogger(__name__)

RECORD_PATTERN = re.compile(r"(q|f)(\d+),([a-zA-Z0-9])=(q|f)(\d+)")


@dataclass
class ParseOutcome:
    records: list[TransitionRecord] = field(default_factory=list)
    warnings: list[ParseWarning] = field(default_factory=list)


def parse_record(line: str) -> TransitionRecord:
    match = RECORD_PATTERN.fullmatch(line.strip())
    if match is None:
        raise ValueError("expected <tag><digits>,<symbol>=<tag><digits>")

    src_tag, src_digits, symbol, dst_tag, dst_digits = match.groups()
    return TransitionRecord(
        source=State(src_tag, src_digits),
        symbol=symbol,
        dest=State(dst_tag, dst_digits),
    )


def parse_records(lines: Iterable[str]) -> ParseOutcome:
    """
    Parse transition lines, skipping malformed ones.

    Blank lines and lines starting with '#' are ignored. Every other line
    that does not match the record grammar becomes a ParseWarning and is
    logged; parsing continues with the next line.
    """
    outcome = ParseOutcome()

    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            outcome.records.append(parse_record(line))
        except ValueError as e:
            warning = ParseWarning(line_no=line_no, line=line, reason=str(e))
            logger.warning("skipping malformed transition %s", warning)
            outcome.warnings.append(warning)

    return outcome
