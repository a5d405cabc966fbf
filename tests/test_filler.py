"""Tests for in-place container filling."""

from dataclasses import dataclass

import numpy as np
import pytest
import torch

from pinneaple_fixtures import CountingStream, CyclicStream, FixedSequence, ShapeError, fill

from .conftest import FailingStream


@dataclass
class Cell:
    row: int
    col: int


class TestFillOrder:
    """Slots are written in ascending index order."""

    def test_leaf_list(self) -> None:
        out = [0, 0, 0, 0]
        fill(CyclicStream([10.0, 20.0, 30.0]), out, int)
        assert out == [10, 20, 30, 10]

    def test_aggregate_list(self) -> None:
        out = [None] * 3
        fill(CyclicStream([1.0, 2.0, 3.0, 4.0, 5.0, 6.0]), out, Cell)
        assert out == [Cell(1, 2), Cell(3, 4), Cell(5, 6)]

    def test_length_unchanged(self) -> None:
        out = [None] * 5
        fill(CyclicStream([1.0]), out, int)
        assert len(out) == 5

    def test_empty_container(self) -> None:
        s = CountingStream(CyclicStream([1.0]))
        out: list = []
        fill(s, out, Cell)
        assert out == []
        assert s.pulls == 0

    def test_pulls(self, counting) -> None:
        s = counting([1.0, 2.0])
        fill(s, [None] * 7, Cell)
        assert s.pulls == 14


class TestFillContainers:
    """Containers beyond plain lists."""

    def test_numpy_dtype_as_target(self) -> None:
        arr = np.zeros(4, dtype=np.int8)
        fill(CyclicStream([1.0, 130.0]), arr)
        assert arr.tolist() == [1, -126, 1, -126]

    def test_numpy_rows_without_target(self, counting) -> None:
        """Each row of a 2-d array takes one pull per cell."""
        s = counting([float(i) for i in range(6)])
        arr = np.zeros((3, 2), dtype=np.int32)
        fill(s, arr)
        assert arr.tolist() == [[0, 1], [2, 3], [4, 5]]
        assert s.pulls == 6

    def test_numpy_3d_without_target(self, counting) -> None:
        s = counting([float(i) for i in range(12)])
        arr = np.zeros((2, 3, 2), dtype=np.int16)
        fill(s, arr)
        assert arr.reshape(-1).tolist() == list(range(12))
        assert s.pulls == 12

    def test_numpy_structured(self) -> None:
        dt = np.dtype([("a", "u1"), ("b", "f4")])
        arr = np.zeros(2, dtype=dt)
        fill(CyclicStream([1.0, 0.5, 2.0, 1.5]), arr)
        assert arr["a"].tolist() == [1, 2]
        assert arr["b"].tolist() == [0.5, 1.5]

    def test_numpy_rows(self) -> None:
        arr = np.zeros((3, 2), dtype=np.int32)
        fill(CyclicStream([float(i) for i in range(6)]), arr, FixedSequence(np.int32, 2))
        assert arr.tolist() == [[0, 1], [2, 3], [4, 5]]

    def test_torch_tensor(self) -> None:
        t = torch.zeros(3, dtype=torch.float64)
        fill(CyclicStream([0.5, 1.5, 2.5]), t, float)
        assert t.tolist() == [0.5, 1.5, 2.5]


class TestFillFailures:
    """Failure contract of fill."""

    def test_stream_failure_leaves_prefix(self) -> None:
        out = [0, 0, 0, 0]
        with pytest.raises(RuntimeError, match="stream broke"):
            fill(FailingStream([1.0, 2.0]), out, int)
        assert out == [1, 2, 0, 0]

    def test_failure_mid_aggregate_leaves_slot_untouched(self) -> None:
        out = [None, None, None]
        s = FailingStream([1.0, 2.0, 3.0])
        with pytest.raises(RuntimeError):
            fill(s, out, Cell)
        assert out == [Cell(1, 2), None, None]
        assert s.pulls == 3

    def test_missing_target_for_list(self) -> None:
        s = CountingStream(CyclicStream([1.0]))
        out = [0, 0]
        with pytest.raises(ShapeError, match="element target"):
            fill(s, out)
        assert s.pulls == 0

    def test_bad_target_writes_nothing(self) -> None:
        out = [7, 7]
        with pytest.raises(ShapeError):
            fill(CyclicStream([1.0]), out, str)
        assert out == [7, 7]
