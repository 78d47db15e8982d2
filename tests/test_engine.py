"""
Unit tests for the line mutation engine.

The engine is pure: every case here works on plain lists.
"""

import pytest

from inscribe.exceptions import EmptyTextError, InvalidLineNumberError, InvalidRangeError
from inscribe.mutation import apply, validate_operation
from inscribe.schemas import AppendEnd, ClearRange, InsertAt


ABC = ["a", "b", "c"]


class TestInsertAt:
    """Insert and overwrite at a 1-based line."""

    def test_insert_shifts_following_lines(self):
        assert apply(ABC, InsertAt(line=2, text="X")) == ["a", "X", "b", "c"]

    def test_overwrite_replaces_in_place(self):
        assert apply(ABC, InsertAt(line=2, text="X", overwrite=True)) == ["a", "X", "c"]

    def test_default_line_is_first(self):
        assert apply(ABC, InsertAt(text="X")) == ["X", "a", "b", "c"]

    def test_insert_at_last_line(self):
        assert apply(ABC, InsertAt(line=3, text="X")) == ["a", "b", "X", "c"]

    def test_insert_one_past_end_appends(self):
        assert apply(ABC, InsertAt(line=4, text="X")) == ["a", "b", "c", "X"]

    def test_insert_past_end_pads_with_empty_lines(self):
        assert apply(ABC, InsertAt(line=6, text="X")) == ["a", "b", "c", "", "", "X"]

    def test_overwrite_past_end_matches_insert(self):
        """Extending the buffer gives the same result in both modes."""
        inserted = apply(ABC, InsertAt(line=6, text="X"))
        overwritten = apply(ABC, InsertAt(line=6, text="X", overwrite=True))
        assert inserted == overwritten

    def test_insert_into_empty_buffer(self):
        assert apply([], InsertAt(line=1, text="X")) == ["X"]
        assert apply([], InsertAt(line=3, text="X")) == ["", "", "X"]

    @pytest.mark.parametrize("length", [0, 1, 3, 7])
    def test_insert_within_buffer_grows_by_one(self, length):
        buffer = [f"line{i}" for i in range(1, length + 1)]
        for line in range(1, length + 1):
            result = apply(buffer, InsertAt(line=line, text="X"))
            assert len(result) == length + 1
            assert result[line - 1] == "X"
            assert result[:line - 1] == buffer[:line - 1]
            assert result[line:] == buffer[line - 1:]

    @pytest.mark.parametrize("length", [0, 2, 5])
    def test_insert_beyond_buffer_has_length_of_line(self, length):
        buffer = ["x"] * length
        for line in range(length + 1, length + 4):
            result = apply(buffer, InsertAt(line=line, text="T"))
            assert len(result) == line
            assert result[length:line - 1] == [""] * (line - 1 - length)
            assert result[-1] == "T"

    def test_overwrite_keeps_length_and_other_lines(self):
        buffer = ["1", "2", "3", "4"]
        for line in range(1, 5):
            result = apply(buffer, InsertAt(line=line, text="X", overwrite=True))
            assert len(result) == 4
            assert result[line - 1] == "X"
            assert [r for i, r in enumerate(result) if i != line - 1] == \
                [b for i, b in enumerate(buffer) if i != line - 1]

    @pytest.mark.parametrize("line", [0, -1, -10])
    def test_line_below_one_rejected(self, line):
        with pytest.raises(InvalidLineNumberError) as exc:
            apply(ABC, InsertAt(line=line, text="X"))
        assert exc.value.line == line

    def test_missing_text_rejected(self):
        with pytest.raises(EmptyTextError):
            apply(ABC, InsertAt(line=1))

    def test_empty_string_is_valid_text(self):
        assert apply(ABC, InsertAt(line=2, text="")) == ["a", "", "b", "c"]


class TestAppendEnd:
    """Append as a new final line."""

    def test_append(self):
        assert apply(ABC, AppendEnd(text="d")) == ["a", "b", "c", "d"]

    def test_append_to_empty_buffer(self):
        assert apply([], AppendEnd(text="d")) == ["d"]

    def test_append_empty_line(self):
        assert apply(["a"], AppendEnd(text="")) == ["a", ""]

    def test_missing_text_rejected(self):
        with pytest.raises(EmptyTextError):
            apply(ABC, AppendEnd())


class TestClearRange:
    """Clear to end of file, or an inclusive range."""

    def test_clear_inclusive_range(self):
        assert apply(["a", "b", "c", "d"], ClearRange(start=2, end=3)) == ["a", "d"]

    def test_clear_to_end(self):
        assert apply(["a", "b"], ClearRange(start=2)) == ["a"]

    def test_clear_everything(self):
        assert apply(ABC, ClearRange(start=1)) == []
        assert apply(ABC, ClearRange(start=1, end=3)) == []

    def test_clear_single_line(self):
        assert apply(ABC, ClearRange(start=2, end=2)) == ["a", "c"]

    def test_start_past_end_is_noop(self):
        assert apply(ABC, ClearRange(start=4)) == ABC
        assert apply(ABC, ClearRange(start=5, end=9)) == ABC
        assert apply([], ClearRange(start=1)) == []

    def test_end_past_buffer_is_clamped(self):
        assert apply(ABC, ClearRange(start=2, end=10)) == ["a"]

    def test_range_length(self):
        buffer = [str(i) for i in range(1, 11)]
        result = apply(buffer, ClearRange(start=3, end=6))
        assert len(result) == 10 - 4
        assert result == ["1", "2", "7", "8", "9", "10"]

    def test_start_after_end_rejected(self):
        with pytest.raises(InvalidRangeError) as exc:
            apply(ABC, ClearRange(start=3, end=2))
        assert (exc.value.start, exc.value.end) == (3, 2)

    @pytest.mark.parametrize("start,end", [(0, None), (0, 2), (1, 0), (-2, 3)])
    def test_line_below_one_rejected(self, start, end):
        with pytest.raises(InvalidLineNumberError):
            apply(ABC, ClearRange(start=start, end=end))


class TestPurity:
    """The engine never mutates its input."""

    @pytest.mark.parametrize("op", [
        InsertAt(line=2, text="X"),
        InsertAt(line=2, text="X", overwrite=True),
        InsertAt(line=9, text="X"),
        AppendEnd(text="X"),
        ClearRange(start=1, end=2),
        ClearRange(start=2),
    ])
    def test_input_untouched_and_deterministic(self, op):
        buffer = ["a", "b", "c"]
        first = apply(buffer, op)
        second = apply(buffer, op)
        assert buffer == ["a", "b", "c"]
        assert first == second
        assert first is not buffer

    def test_noop_clear_returns_copy(self):
        buffer = ["a"]
        result = apply(buffer, ClearRange(start=5))
        assert result == buffer
        assert result is not buffer


class TestValidateOperation:
    """Buffer-independent checks used before any file is opened."""

    def test_valid_operations_pass(self):
        validate_operation(InsertAt(line=1, text="x"))
        validate_operation(AppendEnd(text="x"))
        validate_operation(ClearRange(start=1, end=1))

    def test_invalid_insert_line(self):
        with pytest.raises(InvalidLineNumberError):
            validate_operation(InsertAt(line=0))
