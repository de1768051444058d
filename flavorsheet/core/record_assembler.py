"""
Builds a ``CreatureRecord`` from the mode sections of one creature.
"""

from typing import Dict, Iterable, List, Optional

from .models import FLAVOR_BY_TOKEN, NAME_MODE, CreatureRecord, TextPair
from .text_expression import TextExpressionParser


def first_parsed_line(lines: Iterable[str], text_parser: TextExpressionParser) -> Optional[List[TextPair]]:
    """Pairs of the first line that yields any; later lines are not parsed."""
    for line in lines:
        pairs = text_parser.parse(line)
        if pairs:
            return pairs
    return None


def assemble_record(
    creature_id: str,
    mode_blocks: Dict[str, List[str]],
    text_parser: Optional[TextExpressionParser] = None,
) -> CreatureRecord:
    text_parser = text_parser or TextExpressionParser()
    record = CreatureRecord(id=creature_id)

    for mode, lines in mode_blocks.items():
        flavor = FLAVOR_BY_TOKEN.get(mode)
        if flavor is not None:
            pairs = first_parsed_line(lines, text_parser)
            if pairs is not None:
                record.flavor_texts[flavor.name] = pairs
        elif mode == NAME_MODE:
            pairs = first_parsed_line(lines, text_parser)
            if pairs is not None:
                record.name = tuple(pairs[0])

    return record
