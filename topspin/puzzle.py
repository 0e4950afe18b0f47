import random
from typing import Sequence

from topspin.base import chainable_method
from topspin.config import Config
from topspin.moves import State, apply_operation, canonical_operation, invert_moves, validate_k
from topspin.orbit import explore_cycle, explore_cycle_light, CycleRecord, CycleStats


class TopSpin:
    """
    TopSpin 谜题：n 个编号排成环，转盘一次反转前 k 个。
    action space: L/1, R/2, X/3
    s_{t+1} = T(s_t, a_t)
    """

    def __init__(self, n: int = None, k: int = None, state: Sequence = None):
        if state is not None:
            state = tuple(state)
            n = len(state)
        self.n = n if n is not None else Config.DEFAULT_N
        self.k = validate_k(k if k is not None else Config.DEFAULT_K, self.n)
        self.solved: State = tuple(range(1, self.n + 1))
        if state is not None and sorted(state) != sorted(self.solved):
            raise ValueError(f"state must be a permutation of 1..{self.n}")
        self.state: State = state if state is not None else self.solved
        self.history: list = []

    def __repr__(self):
        return f"TopSpin(n={self.n}, k={self.k}, state={list(self.state)})"

    def __eq__(self, other):
        if not isinstance(other, TopSpin):
            return NotImplemented
        return self.k == other.k and self.state == other.state

    def __hash__(self):
        return hash((self.k, self.state))

    def clone(self):
        other = TopSpin(k=self.k, state=self.state)
        other.history = list(self.history)
        return other

    @chainable_method
    def reset(self):
        self.state = self.solved
        self.history.clear()

    def get_state(self) -> State:
        return self.state

    def is_solved(self) -> bool:
        return self.state == self.solved

    @chainable_method
    def apply(self, moves: Sequence | str):
        """施加一个或一组操作码，失败时状态不变"""
        if isinstance(moves, str):
            moves = [moves]
        state = self.state
        for op in moves:
            state = apply_operation(state, op, self.k)
        self.state = state
        self.history.extend(moves)

    @chainable_method
    def undo(self, steps: int = 1):
        """按逆操作撤销最近 steps 步"""
        steps = min(steps, len(self.history))
        if steps <= 0:
            return
        last = self.history[-steps:]
        state = self.state
        for op in invert_moves(last):
            state = apply_operation(state, op, self.k)
        self.state = state
        del self.history[-steps:]

    def scramble(self, moves: int = 20, alphabet: Sequence = None, seed: int = None) -> list:
        """生成打乱序列，返回 move list（不施加）"""
        alphabet = list(alphabet or Config.DEFAULT_MOVES)
        for op in alphabet:
            canonical_operation(op)
        rng = random.Random(seed)
        return rng.choices(alphabet, k=moves)

    def explore(self, sequence: Sequence, light: bool = False, max_moves: int = None) -> CycleRecord | CycleStats:
        """以当前状态为起点，探索 sequence 生成的循环"""
        if max_moves is None:
            max_moves = Config.MAX_MOVES
        if light:
            return explore_cycle_light(self.state, sequence, self.k, max_moves=max_moves)
        return explore_cycle(self.state, sequence, self.k, max_moves=max_moves)

    @staticmethod
    def commutator(A: list, B: list) -> list:
        """
        交换子 [A, B] = A B A⁻¹ B⁻¹
        """
        return list(A) + list(B) + invert_moves(A) + invert_moves(B)

    @staticmethod
    def conjugate(A: list, B: list) -> list:
        """共轭 A B A⁻¹"""
        return list(A) + list(B) + invert_moves(A)
