"""
在 Cayley 图上沿固定操作序列循环行走，直到回到起始状态。

所有基础变换都是双射，轨道有限，因此必然回到起点本身；
默认不设步数上限，max_moves 仅作为可选保护。
"""
import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Sequence

import numpy as np
import pandas as pd

from topspin.errors import CycleLimitError
from topspin.moves import State, resolve_operation

logger = logging.getLogger(__name__)


class CycleStats(NamedTuple):
    total_moves: int
    unique_states_count: int


@dataclass
class CycleRecord:
    allowed_positions: list
    k: int
    states: list[State] = field(default_factory=list)
    operations: list = field(default_factory=list)
    total_moves: int = 0
    unique_states_count: int = 0

    @property
    def n(self) -> int:
        return len(self.states[0]) if self.states else 0

    @property
    def start_state(self) -> State:
        return self.states[0]

    @property
    def redundant_states(self) -> int:
        return self.total_moves + 1 - self.unique_states_count

    @property
    def stats(self) -> CycleStats:
        return CycleStats(self.total_moves, self.unique_states_count)

    @property
    def cycle_info(self) -> str:
        return (
            f"Cycle analysis for n = {self.n}, k = {self.k}, "
            f"allowed_positions = [{', '.join(map(str, self.allowed_positions))}]\n"
            f"Total moves in cycle: {self.total_moves}\n"
            f"Number of unique states: {self.unique_states_count}\n"
            f"Repeated states: {self.redundant_states}\n"
            f"Cycle length: {self.total_moves}\n"
        )

    def state_matrix(self) -> np.ndarray:
        """(total_moves + 1) x n, 第 0 行为起始状态"""
        return np.asarray(self.states).reshape(len(self.states), self.n)

    def to_frame(self) -> pd.DataFrame:
        """
        状态表，每行是施加该行 operation 之前的状态：
        step | V1..Vn          | operation
        1    | start state     | op1
        2    | after op1       | op2
        ...
        NA   | 回到 start state | None
        """
        columns = [f"V{i + 1}" for i in range(self.n)]
        df = pd.DataFrame(self.state_matrix(), columns=columns)
        df['operation'] = pd.Series(list(self.operations) + [None], dtype=object)
        df['step'] = pd.array(list(range(1, len(self.states))) + [None], dtype="Int64")
        return df


def _check_sequence(allowed_positions: Sequence) -> list:
    allowed_positions = list(allowed_positions)
    if not allowed_positions:
        raise ValueError("allowed_positions 不能为空")
    return allowed_positions


def explore_cycle(start_state: Sequence, allowed_positions: Sequence, k: int = None,
                  verbose: bool = False, max_moves: int = None) -> CycleRecord:
    """
    从 start_state 出发反复执行 allowed_positions，直到状态回到 start_state。
    记录全部经过的状态与操作，内存随 total_moves 线性增长。

    示例:
        record = explore_cycle(range(1, 21), ['1', '3', '2'], k=4)
        print(record.cycle_info)
        record.to_frame().head()
    """
    allowed_positions = _check_sequence(allowed_positions)
    steps = [(op, resolve_operation(op, k)) for op in allowed_positions]
    start_state = tuple(start_state)
    current_state = start_state
    visited = {start_state}
    record = CycleRecord(allowed_positions=allowed_positions, k=k, states=[start_state], unique_states_count=1)

    while True:
        for op, transform in steps:
            current_state = transform(current_state)

            record.total_moves += 1
            record.states.append(current_state)
            record.operations.append(op)

            if current_state not in visited:
                visited.add(current_state)
                record.unique_states_count += 1

            if current_state == start_state:
                if verbose:
                    logger.info(record.cycle_info)
                return record

            if max_moves is not None and record.total_moves >= max_moves:
                raise CycleLimitError(max_moves, ''.join(map(str, allowed_positions)))


def explore_cycle_light(start_state: Sequence, allowed_positions: Sequence, k: int = None,
                        max_moves: int = None) -> CycleStats:
    """只统计 total_moves 与 unique_states_count，不保留历史，供大量随机搜索调用"""
    allowed_positions = _check_sequence(allowed_positions)
    transforms = [resolve_operation(op, k) for op in allowed_positions]
    start_state = tuple(start_state)
    current_state = start_state
    visited = {start_state}
    total_moves = 0

    while True:
        for transform in transforms:
            current_state = transform(current_state)
            total_moves += 1
            visited.add(current_state)

            if current_state == start_state:
                return CycleStats(total_moves, len(visited))

            if max_moves is not None and total_moves >= max_moves:
                raise CycleLimitError(max_moves, ''.join(map(str, allowed_positions)))
