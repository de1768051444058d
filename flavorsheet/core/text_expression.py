# -*- coding: utf-8 -*-
"""
Text Expression Parser
======================

Turns one script statement into the ``lang(native, localized)`` pairs it
carries, e.g.::

    txt lang("ニャー" + "ン", cnvtalk("Meow" + "n")), lang("...", "...")

Only the handful of shapes used by the creature database are recognized.
Anything else yields no pairs; the parser never raises.
"""

import io
import logging
import re
from typing import List, Optional, Tuple

from .models import TextPair

LANG_CALL_OPEN = "lang("
SEX_PLACEHOLDER = "#onii"


class TextExpressionParser:
    """Parses ``txt``/name statements into native and localized text."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

        # _onii(cdata(CDATA_SEX, CHARA_PLAYER)) picks a sibling title by player sex
        self.sex_check_re = re.compile(r'_onii\(cdata\(CDATA_SEX,\s*CHARA_PLAYER\)\)')

        # txt ... / cdatan(CDATAN_NAME, rc) = ...
        self.statement_lhs_re = re.compile(
            r'^\s*txt\s*|^\s*cdatan\(CDATAN_NAME, rc\) = ',
            re.MULTILINE
        )

        # cnvtalk( wraps the localized side of talk lines
        self.convert_talk_re = re.compile(r'^cnvtalk\s*\(')

    def parse(self, statement: str) -> List[TextPair]:
        """Return the pairs of every well-formed language call, in order."""
        expression = statement.strip()
        expression = self.sex_check_re.sub(SEX_PLACEHOLDER, expression)
        expression = self.statement_lhs_re.sub("", expression)

        pairs: List[TextPair] = []
        for call in split_top_level(expression):
            if not call.startswith(LANG_CALL_OPEN) or not call.endswith(')'):
                continue

            arguments = self._split_lang_arguments(call)
            if arguments is None:
                self.logger.debug("Skipping lang call without two arguments: %s", call)
                continue

            native_exp, localized_exp = arguments
            native = fold_concatenation(native_exp)
            localized = fold_concatenation(self._unwrap_localized(localized_exp))

            pairs.append(TextPair(native.strip('"'), localized.strip('"')))

        return pairs

    def _split_lang_arguments(self, call: str) -> Optional[Tuple[str, str]]:
        inner = call[len(LANG_CALL_OPEN):-1].strip()
        comma = find_top_level_comma(inner)
        if comma < 0:
            return None
        return inner[:comma].strip(), inner[comma + 1:].strip()

    def _unwrap_localized(self, expression: str) -> str:
        expression = self.convert_talk_re.sub("", expression).strip()
        # cnvtalk's own closing paren is left behind
        if expression.endswith(')'):
            expression = expression[:-1].strip()
        return expression


def split_top_level(expression: str) -> List[str]:
    """Split on commas outside parentheses.

    A comma in the last position is not a separator. Pieces are trimmed.
    """
    pieces: List[str] = []
    depth = 0
    start = 0
    last = len(expression) - 1

    for i, char in enumerate(expression):
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1

        if depth != 0 or i >= last or char != ',':
            continue

        pieces.append(expression[start:i].strip())
        start = i + 1

    if start < len(expression):
        pieces.append(expression[start:].strip())

    return pieces


def find_top_level_comma(text: str) -> int:
    """Index of the first comma outside parentheses, or -1."""
    depth = 0
    for i, char in enumerate(text):
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
        elif depth == 0 and char == ',':
            return i
    return -1


def fold_concatenation(expression: str) -> str:
    """Join a ``"a" + "b" + var`` expression into one string.

    Splits on every '+', including ones inside nested calls.
    """
    with io.StringIO() as buffer:
        for part in expression.split('+'):
            segment = part.strip()
            if len(segment) >= 2 and segment[0] == '"' and segment[-1] == '"':
                segment = segment[1:-1]
            buffer.write(segment)
        return buffer.getvalue()


_default_parser = None


def parse_text(statement: str) -> List[TextPair]:
    """Module-level shortcut around a shared ``TextExpressionParser``."""
    global _default_parser
    if _default_parser is None:
        _default_parser = TextExpressionParser()
    return _default_parser.parse(statement)

