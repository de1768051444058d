"""
Core module for FlavorSheet
===========================
"""

from .models import CreatureRecord, TextPair, FlavorField, FLAVOR_FIELDS
from .block_splitter import split_creature_blocks
from .scoped_block_parser import parse_mode_blocks
from .text_expression import TextExpressionParser, parse_text
from .record_assembler import assemble_record
from .db_parser import DbParser
from .output_formatter import SheetFormatter

__all__ = [
    'CreatureRecord', 'TextPair', 'FlavorField', 'FLAVOR_FIELDS',
    'split_creature_blocks', 'parse_mode_blocks',
    'TextExpressionParser', 'parse_text',
    'assemble_record', 'DbParser',
    'SheetFormatter'
]
