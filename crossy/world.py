"""
The endless strip of rows ahead of (and behind) the player.

Public row indices start at 1 for the first generated row. Row 0 and
everything below it is the starting safe strip: plain grass, never stored.
Stored rows are keyed by storage index, see ``to_storage_index``.
"""

import logging
import random
from typing import Dict, Iterator, Optional, Tuple

from crossy.config import GameConfig
from crossy.rows import Row, RowGenerator, is_road

logger = logging.getLogger(__name__)

# Spreads per-row seeds apart so neighbouring worlds don't share rows.
_ROW_SEED_STRIDE = 1_000_003


def to_storage_index(row: int) -> int:
    """Map a public row index to its slot among generated rows (row 1 -> 0)."""
    return row - 1


class WorldTimeline:
    """Append-only sequence of generated rows.

    Rows are generated in batches whenever the player gets within
    ``lookahead`` rows of the end. Each row draws from its own RNG seeded by
    (world seed, row index), so a row dropped by ``trim_behind`` comes back
    identical if it is ever looked up again.
    """

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        self.config = config or GameConfig()
        if seed is None:
            seed = self.config.seed
        if seed is None:
            seed = random.randrange(2 ** 32)
        self.seed = seed
        self._rows: Dict[int, Row] = {}  # storage index -> row
        self._generated = 0

    def __len__(self) -> int:
        # Count of rows ever generated; trimming never shrinks it.
        return self._generated

    @staticmethod
    def is_safe_strip(row: int) -> bool:
        return row <= 0

    def ensure_ahead(self, current_row: int, lookahead: Optional[int] = None) -> int:
        """Append one batch if ``current_row`` is close to the end. Returns rows added."""
        if lookahead is None:
            lookahead = self.config.lookahead
        if current_row <= len(self) - lookahead:
            return 0
        start = self._generated
        for index in range(start, start + self.config.batch_size):
            self._rows[index] = self._generate(index)
        self._generated += self.config.batch_size
        logger.debug("appended rows %d..%d", start + 1, self._generated)
        return self.config.batch_size

    def row_at(self, row: int) -> Optional[Row]:
        if self.is_safe_strip(row):
            return None
        index = to_storage_index(row)
        if index >= self._generated:
            return None
        stored = self._rows.get(index)
        if stored is None:
            logger.warning("row %d was trimmed; regenerating it from its seed", row)
            stored = self._rows[index] = self._generate(index)
        return stored

    def stored_rows(self) -> Iterator[Tuple[int, Row]]:
        """Yield (public row index, row) for every row still held in memory."""
        for index in sorted(self._rows):
            yield index + 1, self._rows[index]

    def road_rows(self) -> Iterator[Tuple[int, Row]]:
        return ((row, data) for row, data in self.stored_rows() if is_road(data))

    def trim_behind(self, current_row: int) -> int:
        """Drop stored rows more than ``retain_behind`` rows behind ``current_row``."""
        keep = self.config.retain_behind
        if keep is None:
            return 0
        cutoff = to_storage_index(current_row - keep)
        stale = [index for index in self._rows if index < cutoff]
        for index in stale:
            del self._rows[index]
        if stale:
            logger.debug("trimmed %d rows behind row %d", len(stale), current_row)
        return len(stale)

    def _generate(self, index: int) -> Row:
        rng = random.Random(self.seed * _ROW_SEED_STRIDE + index)
        return RowGenerator(self.config, rng).generate_row()
