# -*- coding: utf-8 -*-
"""
Tests for BeamPartitioner - contiguous beam work blocks.

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

import numpy as np
import pytest

from facetecho.simulation.partition import BeamBlock, BeamPartitioner


def _covered(blocks):
    beams = []
    for block in blocks:
        beams.extend(range(block.start, block.end))
    return beams


class TestBeamPartitioner:

    def test_default_one_beam_per_block(self):
        blocks = BeamPartitioner(3).blocks()
        assert blocks == [BeamBlock(0, 1), BeamBlock(1, 2), BeamBlock(2, 3)]

    def test_block_size(self):
        blocks = BeamPartitioner(10, block_size=4).blocks()
        assert blocks == [BeamBlock(0, 4), BeamBlock(4, 8), BeamBlock(8, 10)]

    @pytest.mark.parametrize("n_beams,n_blocks", [(64, 8), (10, 3), (5, 5)])
    def test_n_blocks_balanced(self, n_beams, n_blocks):
        blocks = BeamPartitioner(n_beams, n_blocks=n_blocks).blocks()
        sizes = [b.size for b in blocks]
        assert len(blocks) == n_blocks
        assert max(sizes) - min(sizes) <= 1
        assert _covered(blocks) == list(range(n_beams))

    def test_n_blocks_capped(self):
        assert len(BeamPartitioner(3, n_blocks=10)) == 3

    def test_block_slice(self):
        block = BeamBlock(2, 5)
        assert block.slice == slice(2, 5)
        assert block.size == 3

    def test_iteration(self):
        assert list(BeamPartitioner(4, block_size=2)) == [BeamBlock(0, 2),
                                                          BeamBlock(2, 4)]

    def test_both_options_rejected(self):
        with pytest.raises(ValueError, match="not both"):
            BeamPartitioner(4, block_size=2, n_blocks=2)

    def test_nonpositive_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            BeamPartitioner(0)
        with pytest.raises(ValueError, match="positive"):
            BeamPartitioner(4, block_size=0)

    def test_type_checked(self):
        with pytest.raises(TypeError):
            BeamPartitioner(4.0)
        with pytest.raises(TypeError):
            BeamPartitioner(4, n_blocks=True)

    def test_numpy_integers_accepted(self):
        partitioner = BeamPartitioner(np.int64(6), block_size=np.int32(4))
        assert partitioner.n_beams == 6 and type(partitioner.n_beams) is int
        assert partitioner.blocks() == [BeamBlock(0, 4), BeamBlock(4, 6)]
        assert len(BeamPartitioner(6, n_blocks=np.int64(3))) == 3
