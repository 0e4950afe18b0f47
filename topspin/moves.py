"""
TopSpin 状态变换与操作解释器

状态 state 为编号的排列（tuple），每个变换返回新的 tuple，不修改输入：
    L / 1 : shift_left     首元素移到末尾
    R / 2 : shift_right    末元素移到首位
    X / 3 : reverse_prefix 前 k 个元素反转（转盘），k 对整次运行固定
"""
import numbers
from typing import Callable, Iterable, Sequence

from topspin.errors import UnknownOperationError, InvalidPrefixError

State = tuple

SHIFT_LEFT, SHIFT_RIGHT, REVERSE_PREFIX = 'L', 'R', 'X'
# 字母码与数字码等价
OPERATION_ALIASES = {
    'L': SHIFT_LEFT, '1': SHIFT_LEFT,
    'R': SHIFT_RIGHT, '2': SHIFT_RIGHT,
    'X': REVERSE_PREFIX, '3': REVERSE_PREFIX,
}
INVERSE_OPERATION = {'L': 'R', '1': '2', 'R': 'L', '2': '1', 'X': 'X', '3': '3'}


def shift_left(state: Sequence) -> State:
    state = tuple(state)
    return state[1:] + state[:1]


def shift_right(state: Sequence) -> State:
    state = tuple(state)
    return state[-1:] + state[:-1]


def reverse_prefix(state: Sequence, k: int) -> State:
    """反转前 k 个元素，其余 n-k 个保持原序；k 越界抛 InvalidPrefixError(IndexError)"""
    state = tuple(state)
    validate_k(k, len(state))
    return state[k - 1::-1] + state[k:]


def validate_k(k: int, n: int) -> int:
    """运行前一次性检查 k，失败即配置错误"""
    if isinstance(k, bool) or not isinstance(k, numbers.Integral) or not 1 <= k <= n:
        raise InvalidPrefixError(k, n)
    return k


def canonical_operation(op) -> str:
    try:
        return OPERATION_ALIASES[op]
    except (KeyError, TypeError):
        raise UnknownOperationError(op) from None


def uses_prefix(operations: Iterable) -> bool:
    return any(OPERATION_ALIASES.get(op) == REVERSE_PREFIX for op in operations if isinstance(op, str))


def resolve_operation(op, k: int = None) -> Callable[[Sequence], State]:
    """操作码 -> 变换函数（已绑定 k）"""
    kind = canonical_operation(op)
    if kind == SHIFT_LEFT:
        return shift_left
    if kind == SHIFT_RIGHT:
        return shift_right
    return lambda state: reverse_prefix(state, k)


def apply_operation(state: Sequence, op, k: int = None) -> State:
    return resolve_operation(op, k)(state)


def apply_operations(state: Sequence, operations: Iterable, k: int = None) -> State:
    """
    依次应用一组操作，例如 apply_operations(range(1, 21), ['1', '3', '2'], k=4)
    遇到未知操作码立即中止
    """
    current_state = tuple(state)
    for op in operations:
        current_state = apply_operation(current_state, op, k)
    return current_state


def invert_operation(op) -> str:
    try:
        return INVERSE_OPERATION[op]
    except (KeyError, TypeError):
        raise UnknownOperationError(op) from None


def invert_moves(moves: Sequence) -> list:
    """将 moves 转成可还原的逆操作序列（反向 + 方向反）,保留原别名形式"""
    return [invert_operation(op) for op in reversed(moves)]
