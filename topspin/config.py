import os
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class Config(object):
    """
       全局参数配置，默认值可由 YAML 文件覆盖（Config.load），类属性优先
    """
    DEFAULT_N = 20  # 状态长度,TopSpin 标准为 20 个编号
    DEFAULT_K = 4  # 转盘长度,reverse_prefix 的 k
    DEFAULT_MOVES = ['L', 'R', 'X']
    COMBO_LENGTH = 10
    N_SAMPLES = 100
    N_TOP = 10
    MAX_ITER_FACTOR = 10  # 随机搜索尝试次数上限 = n_samples * factor
    MAX_MOVES = None  # 单次探索步数上限,None 表示不限制
    SEED = None
    LOG_FILE = 'logs/topspin.log'
    LOG_LEVEL = 'WARNING'
    Version = 'v0.1.0'
    _config_path = 'config.yaml'
    __config_data = {}  # 动态加载的数据，用于还原
    __config_dynamic = {}  # 其他配置项，用于运行时

    @staticmethod
    def norm_version(s):
        return s.lstrip('vV') if s else '0.0.0'

    @classmethod
    def load(cls, filepath=None):
        """从YAML文件加载配置项"""
        import yaml
        path = filepath or getattr(cls, '_config_path', 'config.yaml')
        if not os.path.exists(path):
            logger.info(f"配置文件 {path} 不存在，使用默认配置")
            return {}

        with open(path, "r", encoding='utf-8') as f:
            cls.__config_data = yaml.safe_load(f) or {}

        if not isinstance(cls.__config_data, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(cls.__config_data).__name__}")

        for key, value in cls.__config_data.items():
            if not isinstance(key, str) or key.startswith('_'):
                continue
            if hasattr(cls, key):
                current_value = getattr(cls, key)
                if current_value != value:
                    logger.debug(f"配置项 '{key}' 覆盖: {current_value} -> {value}")
                setattr(cls, key, value)
            else:
                # 添加到动态配置
                cls.__config_dynamic[key] = value

        cls.__config_dynamic['IS_LOADED'] = True
        logger.info(f"配置已加载并更新,文件: {path}")
        return cls.__config_dynamic

    @classmethod
    def save(cls, filepath=None):
        """将配置项保存到YAML文件"""
        import yaml
        config_data = cls.get_config_data(raw=True)
        path = filepath or getattr(cls, '_config_path', 'config.yaml')
        _dir = os.path.dirname(path)
        if _dir:
            os.makedirs(_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(config_data, f, default_flow_style=False, allow_unicode=True)

        logger.info(f"已保存配置文件 {path}")
        return config_data

    @classmethod
    def get(cls, key, default=None):
        """
        获取配置值，优先级顺序：
        1. 类属性（静态字段）
        2. __config_dynamic 动态字段
        """
        if hasattr(cls, key):
            return getattr(cls, key, default)
        return cls.__config_dynamic.get(key, default)

    @classmethod
    def update(cls, **kwargs):
        for key, value in kwargs.items():
            if hasattr(cls, key):
                setattr(cls, key, value)
            else:
                cls.__config_dynamic[key] = value

    @classmethod
    def get_config_data(cls, raw: bool = False):
        """当前的配置项, raw=False 时值转为字符串便于打印"""
        config_data = {key: value for key, value in vars(cls).items()
                       if not key.startswith('_') and not callable(value)
                       and not isinstance(value, (classmethod, staticmethod))}
        if raw:
            return config_data
        return {key: f"{value}" for key, value in config_data.items()}
