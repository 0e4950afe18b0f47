import pandas as pd
import pytest

from topspin.errors import UnknownOperationError, CycleLimitError, InvalidPrefixError
from topspin.moves import apply_operation, apply_operations
from topspin.orbit import explore_cycle, explore_cycle_light, CycleStats

SEQUENCES = [
    ["L"],
    ["R"],
    ["X"],
    ["L", "X"],
    ["1", "3", "2"],
    ["X", "R", "R", "X", "L"],
]


def test_shift_left_cycle():
    record = explore_cycle([1, 2, 3, 4, 5], ["L"], k=None)
    assert record.total_moves == 5
    assert record.unique_states_count == 5
    assert record.redundant_states == 1
    assert record.states[0] == record.states[-1] == (1, 2, 3, 4, 5)
    assert record.operations == ["L"] * 5


def test_reverse_prefix_cycle():
    record = explore_cycle(range(1, 11), ["X"], k=4)
    assert record.total_moves == 2
    assert record.unique_states_count == 2


@pytest.mark.parametrize("sequence", SEQUENCES)
def test_returns_to_start(sequence, start_state):
    record = explore_cycle(start_state, sequence, k=4)
    assert record.states[-1] == start_state
    assert start_state not in record.states[1:-1]
    assert len(record.states) == record.total_moves + 1
    assert len(record.operations) == record.total_moves
    assert 1 <= record.unique_states_count <= record.total_moves + 1


@pytest.mark.parametrize("sequence", SEQUENCES)
def test_history_is_consistent(sequence, start_state):
    record = explore_cycle(start_state, sequence, k=4)
    for before, op, after in zip(record.states, record.operations, record.states[1:]):
        assert apply_operation(before, op, 4) == after


@pytest.mark.parametrize("sequence", SEQUENCES)
def test_light_matches_full(sequence, start_state):
    record = explore_cycle(start_state, sequence, k=4)
    stats = explore_cycle_light(start_state, sequence, k=4)
    assert isinstance(stats, CycleStats)
    assert stats == record.stats
    assert stats.unique_states_count == len(set(record.states))


def test_full_pass_multiple_of_sequence_length(start_state):
    sequence = ["1", "3", "2"]
    record = explore_cycle(start_state, sequence, k=4)
    assert record.total_moves % len(sequence) == 0
    assert apply_operations(start_state, sequence * (record.total_moves // 3), 4) == start_state


def test_recurrence_may_stop_mid_pass():
    # 5 次左移即回到起点，不必走完第三轮
    record = explore_cycle(range(1, 6), ["L", "L"])
    assert record.total_moves == 5


def test_aliases_give_identical_cycles(start_state):
    a = explore_cycle(start_state, ["L", "X", "R", "X"], k=4)
    b = explore_cycle(start_state, ["1", "3", "2", "3"], k=4)
    assert a.states == b.states
    assert a.stats == b.stats


def test_unknown_operation_aborts(start_state):
    with pytest.raises(UnknownOperationError):
        explore_cycle(start_state, ["L", "Q"], k=4)
    with pytest.raises(UnknownOperationError):
        explore_cycle_light(start_state, ["Q"], k=4)


def test_invalid_k_aborts():
    with pytest.raises(InvalidPrefixError):
        explore_cycle(range(1, 6), ["X"], k=6)


def test_empty_sequence_rejected(start_state):
    with pytest.raises(ValueError):
        explore_cycle(start_state, [], k=4)
    with pytest.raises(ValueError):
        explore_cycle_light(start_state, [], k=4)


def test_max_moves_cutoff(start_state):
    with pytest.raises(CycleLimitError, match="LX"):
        explore_cycle(start_state, ["L", "X"], k=4, max_moves=3)
    with pytest.raises(CycleLimitError):
        explore_cycle_light(start_state, ["L"], k=4, max_moves=9)
    assert explore_cycle_light(start_state, ["L"], k=4, max_moves=10).total_moves == 10


def test_cycle_info():
    record = explore_cycle(range(1, 6), ["L"], k=3)
    assert record.cycle_info == (
        "Cycle analysis for n = 5, k = 3, allowed_positions = [L]\n"
        "Total moves in cycle: 5\n"
        "Number of unique states: 5\n"
        "Repeated states: 1\n"
        "Cycle length: 5\n"
    )


def test_verbose_logs_summary(caplog):
    with caplog.at_level("INFO", logger="topspin.orbit"):
        explore_cycle(range(1, 6), ["R"], verbose=True)
    assert "Total moves in cycle: 5" in caplog.text


def test_to_frame_framing():
    record = explore_cycle([1, 2, 3], ["L", "X"], k=2)
    df = record.to_frame()
    assert list(df.columns) == ["V1", "V2", "V3", "operation", "step"]
    assert len(df) == record.total_moves + 1

    # 每行是施加该行 operation 之前的状态
    assert tuple(df.iloc[0][["V1", "V2", "V3"]]) == (1, 2, 3)
    assert df.iloc[0]["operation"] == "L"
    assert df.iloc[0]["step"] == 1
    assert tuple(df.iloc[1][["V1", "V2", "V3"]]) == (2, 3, 1)
    assert df.iloc[1]["operation"] == "X"

    last = df.iloc[-1]
    assert tuple(last[["V1", "V2", "V3"]]) == (1, 2, 3)
    assert df["operation"].iloc[-1] is None
    assert pd.isna(last["step"])
    assert df["step"].dtype == "Int64"
    assert list(df["step"].iloc[:-1]) == list(range(1, record.total_moves + 1))


def test_state_matrix_shape(start_state):
    record = explore_cycle(start_state, ["L"], k=4)
    assert record.state_matrix().shape == (11, 10)


def test_missing_k_with_prefix_reversal():
    with pytest.raises(InvalidPrefixError):
        explore_cycle(range(1, 6), ["X"])
    with pytest.raises(InvalidPrefixError):
        explore_cycle_light(range(1, 6), ["L", "3"])
