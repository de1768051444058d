"""
Splits a creature database script into per-creature blocks.

Each creature starts at ``if ( dbid == CREATURE_ID_xxx ) {`` and runs up to
the next such line or the end of the source.
"""

import re
from typing import Dict

CREATURE_ID_PREFIX = "CREATURE_ID_"

_creature_block_re = re.compile(r'if\s*\(\s*dbid\s*==\s*(\w+)\s*\)\s*\{')


def normalize_creature_id(token: str) -> str:
    return token.strip().replace(CREATURE_ID_PREFIX, "").lower()


def split_creature_blocks(source: str) -> Dict[str, str]:
    """Map creature id to its raw block text.

    A creature defined twice keeps the later block.
    """
    blocks: Dict[str, str] = {}
    matches = list(_creature_block_re.finditer(source))

    for i, match in enumerate(matches):
        creature_id = normalize_creature_id(match.group(1))
        start = match.start()
        end = matches[i + 1].start() if i < len(matches) - 1 else len(source)
        blocks[creature_id] = source[start:end].strip()

    return blocks
