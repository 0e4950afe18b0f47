import logging
import random
import warnings
from typing import Sequence

import pandas as pd

from topspin.config import Config
from topspin.errors import TopSpinError, NoResultsWarning
from topspin.moves import uses_prefix, validate_k
from topspin.orbit import explore_cycle_light

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['combination', 'total_moves', 'unique_states_count']


def combination_key(combo: Sequence) -> str:
    return ''.join(map(str, combo))


def find_best_random_combinations(moves: Sequence, combo_length: int, n_samples: int, n_top: int,
                                  start_state: Sequence, k: int = None, seed: int = None,
                                  max_iter_factor: int = None, max_moves: int = None) -> pd.DataFrame:
    """
    随机生成长度为 combo_length 的操作序列，按循环长度找出最长的 n_top 个。

    moves: 允许的操作码，如 ['1', '2', '3'] 或 ['L', 'R', 'X']
    n_samples: 需要成功评估的不重复序列数
    尝试次数上限为 n_samples * max_iter_factor，重复序列同样消耗次数，
    防止字母表太小、不同序列不足时死循环。

    返回 DataFrame[combination, total_moves, unique_states_count]，
    按 total_moves、unique_states_count 降序；没有任何成功结果时返回空表并发出 NoResultsWarning。
    result.attrs['failures'] 为 [(combination, message), ...]
    """
    moves = list(moves)
    if not moves:
        raise ValueError("moves 不能为空")
    if combo_length < 1:
        raise ValueError(f"combo_length must be positive, got {combo_length}")
    start_state = tuple(start_state)
    if uses_prefix(moves):
        validate_k(k, len(start_state))

    if max_iter_factor is None:
        max_iter_factor = Config.MAX_ITER_FACTOR
    if max_iter_factor < 1:
        raise ValueError(f"max_iter_factor must be positive, got {max_iter_factor}")
    if max_moves is None:
        max_moves = Config.MAX_MOVES
    rng = random.Random(seed)

    results = []
    failures = []
    unique_combos = set()
    max_iter = n_samples * max_iter_factor
    attempts = 0

    while len(results) < n_samples and attempts < max_iter:
        attempts += 1
        combo = rng.choices(moves, k=combo_length)
        key = combination_key(combo)
        if key in unique_combos:
            continue
        unique_combos.add(key)

        try:
            res = explore_cycle_light(start_state, combo, k, max_moves=max_moves)
        except TopSpinError as e:
            logger.warning(f"Error for combination {key}: {e}")
            failures.append((key, str(e)))
            continue

        results.append((key, res.total_moves, res.unique_states_count))

    logger.debug(f"random search: {len(results)} results, {len(failures)} failures, {attempts}/{max_iter} attempts")
    df = pd.DataFrame(results, columns=RESULT_COLUMNS).astype(
        {'combination': object, 'total_moves': 'int64', 'unique_states_count': 'int64'})

    if df.empty:
        warnings.warn("No successful results found.", NoResultsWarning, stacklevel=2)
        logger.warning("No successful results found.")
    else:
        df = df.sort_values(['total_moves', 'unique_states_count'], ascending=False, kind='stable')
        df = df.head(n_top).reset_index(drop=True)

    df.attrs['failures'] = failures
    df.attrs['attempts'] = attempts
    return df
