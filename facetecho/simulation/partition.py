# -*- coding: utf-8 -*-
"""
Beam Partition - Split the synthetic-aperture beams into work blocks.

Beams are independent, so the per-beam loop is distributed by cutting
the beam index range ``[0, N_b)`` into contiguous ``BeamBlock`` ranges.
Each block is simulated by one worker and returns its own output rows;
the orchestrator writes them back into the slots the block owns.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

# Standard library
import logging
import numbers
from typing import Iterator, List, NamedTuple, Optional

logger = logging.getLogger(__name__)


def _positive_int(name: str, value: Optional[int]) -> Optional[int]:
    """Return *value* as a positive ``int``; ``None`` passes through."""
    if value is None and name != 'n_beams':
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return int(value)


class BeamBlock(NamedTuple):
    """Contiguous range of beam positions.

    Use directly for slicing the beam axis::

        rows = single_look[block.start:block.end]

    Attributes
    ----------
    start : int
        First beam position (inclusive).
    end : int
        Last beam position (exclusive).
    """

    start: int
    end: int

    @property
    def size(self) -> int:
        """Number of beams in the block."""
        return self.end - self.start

    @property
    def slice(self) -> slice:
        """Slice selecting the block along the beam axis."""
        return slice(self.start, self.end)


class BeamPartitioner:
    """Partition ``n_beams`` beam positions into contiguous blocks.

    Give either *block_size* or *n_blocks*; with neither, every beam is
    its own block. Blocks differ in size by at most one beam when
    *n_blocks* is used.

    Parameters
    ----------
    n_beams : int
        Number of beams. Must be positive.
    block_size : int, optional
        Beams per block (the last block may be smaller).
    n_blocks : int, optional
        Number of blocks, capped at *n_beams*.

    Raises
    ------
    TypeError
        If an argument is not ``int``.
    ValueError
        If an argument is not positive, or both *block_size* and
        *n_blocks* are given.
    """

    def __init__(
        self,
        n_beams: int,
        block_size: Optional[int] = None,
        n_blocks: Optional[int] = None,
    ) -> None:
        if block_size is not None and n_blocks is not None:
            raise ValueError("give block_size or n_blocks, not both")
        self._n_beams = _positive_int('n_beams', n_beams)
        self._block_size = _positive_int('block_size', block_size)
        self._n_blocks = _positive_int('n_blocks', n_blocks)

    @property
    def n_beams(self) -> int:
        """Number of beams partitioned."""
        return self._n_beams

    def blocks(self) -> List[BeamBlock]:
        """Return the blocks in beam order.

        Returns
        -------
        List[BeamBlock]
            Non-overlapping blocks covering ``[0, n_beams)``.
        """
        n = self._n_beams
        if self._n_blocks is not None:
            count = min(self._n_blocks, n)
            base, extra = divmod(n, count)
            blocks = []
            start = 0
            for i in range(count):
                end = start + base + (1 if i < extra else 0)
                blocks.append(BeamBlock(start, end))
                start = end
        else:
            size = self._block_size or 1
            blocks = [BeamBlock(s, min(s + size, n)) for s in range(0, n, size)]

        logger.debug("Partitioned %d beams into %d blocks", n, len(blocks))
        return blocks

    def __iter__(self) -> Iterator[BeamBlock]:
        return iter(self.blocks())

    def __len__(self) -> int:
        return len(self.blocks())

    def __repr__(self) -> str:
        return (f"BeamPartitioner(n_beams={self._n_beams}, "
                f"block_size={self._block_size}, n_blocks={self._n_blocks})")
