class TopSpinError(Exception):
    """topspin 内部错误基类"""


class UnknownOperationError(TopSpinError, ValueError):
    """操作码不在字母表 L/1, R/2, X/3 中"""

    def __init__(self, operation):
        self.operation = operation
        super().__init__(f"Unknown operation: {operation}")


class InvalidPrefixError(TopSpinError, IndexError):
    """reverse_prefix 的 k 超出 [1, n]"""

    def __init__(self, k, n: int):
        self.k = k
        self.n = n
        super().__init__(f"Prefix length k={k} out of range [1, {n}]")


class CycleLimitError(TopSpinError, RuntimeError):
    def __init__(self, max_moves: int, key: str = None):
        self.max_moves = max_moves
        self.key = key
        msg = f"No recurrence within {max_moves} moves"
        if key:
            msg += f" for sequence {key}"
        super().__init__(msg)


class NoResultsWarning(UserWarning):
    pass
