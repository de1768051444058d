"""
Scoped Block Parser
===================

Walks one creature block and collects the statements of every
``dbmode == XXX ) {`` section, following brace depth until the section
closes.

Brace depth is a plain per-line count of ``{`` and ``}``; braces inside
string literals are counted too. A new mode line always opens a fresh
section, even if the previous one never closed (its lines are lost).
"""

import re
from typing import Dict, List, Optional

DBMODE_PREFIX = "DBMODE_"

_mode_start_re = re.compile(r'dbmode == (.*)\) {')
_line_break_re = re.compile(r'\r\n|\n')


def normalize_mode_name(token: str) -> str:
    return token.replace(DBMODE_PREFIX, "").strip()


def split_block_lines(block: str) -> List[str]:
    """Split on line breaks, dropping empty lines."""
    return [line for line in _line_break_re.split(block) if line]


def parse_mode_blocks(block: str) -> Dict[str, List[str]]:
    """Map each mode name in a creature block to its raw statement lines.

    The first and last lines are the creature's own opening and closing
    braces and are never scanned. Sections still open at the end of the
    block are dropped; a mode seen twice keeps its later section.
    """
    blocks: Dict[str, List[str]] = {}
    lines = split_block_lines(block)[1:-1]

    depth = 0
    mode: Optional[str] = None
    buffer: Optional[List[str]] = None

    for line in lines:
        match = _mode_start_re.search(line.strip())
        if match:
            mode = normalize_mode_name(match.group(1))
            depth = 1
            buffer = []
            continue

        if buffer is None:
            continue

        depth += line.count('{')
        depth -= line.count('}')

        if depth > 0:
            if line.strip():
                buffer.append(line)
            continue

        if mode is not None:
            blocks[mode] = buffer

        mode = None
        buffer = None

    return blocks
