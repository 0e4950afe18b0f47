from topspin.errors import TopSpinError, UnknownOperationError, InvalidPrefixError, CycleLimitError, NoResultsWarning
from topspin.moves import (shift_left, shift_right, reverse_prefix, validate_k, canonical_operation,
                           resolve_operation, apply_operation, apply_operations, invert_moves)
from topspin.orbit import CycleRecord, CycleStats, explore_cycle, explore_cycle_light
from topspin.search import find_best_random_combinations
from topspin.puzzle import TopSpin
from topspin.config import Config

__version__ = Config.norm_version(Config.Version)
