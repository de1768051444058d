"""
Creature database parser.

Splits the script into creature blocks, finds the mode sections of each
block and assembles one ``CreatureRecord`` per creature, in source order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Tuple, Union

from flavorsheet.utils.encoding import read_text_safely

from .block_splitter import split_creature_blocks
from .exceptions import SourceReadError
from .models import CreatureRecord
from .record_assembler import assemble_record
from .scoped_block_parser import parse_mode_blocks
from .text_expression import TextExpressionParser


class DbParser:
    def __init__(self, config_manager=None):
        self.logger = logging.getLogger(__name__)
        self.config = config_manager
        self.text_parser = TextExpressionParser()

    @property
    def workers(self) -> int:
        if self.config is None:
            return 1
        return max(1, int(self.config.extraction_settings.parser_workers))

    def parse(self, source: str) -> List[CreatureRecord]:
        blocks = list(split_creature_blocks(source).items())
        self.logger.info("Found %s creature blocks", len(blocks))

        if self.workers > 1 and len(blocks) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                return list(executor.map(self._parse_creature_block, blocks))

        return [self._parse_creature_block(item) for item in blocks]

    def parse_file(self, file_path: Union[str, Path]) -> List[CreatureRecord]:
        path = Path(file_path)
        encoding = "utf-8"
        if self.config is not None:
            encoding = self.config.extraction_settings.source_encoding or encoding

        source = read_text_safely(path, preferred=(encoding,))
        if source is None:
            raise SourceReadError(f"Could not read db file: {path}")

        self.logger.info("Parsing db file %s", path)
        return self.parse(source)

    def _parse_creature_block(self, item: Tuple[str, str]) -> CreatureRecord:
        creature_id, block = item
        mode_blocks = parse_mode_blocks(block)
        self.logger.debug("%s: %s mode blocks (%s)", creature_id, len(mode_blocks), ", ".join(mode_blocks))
        return assemble_record(creature_id, mode_blocks, self.text_parser)
