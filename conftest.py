import pytest

from topspin.config import Config


@pytest.fixture(autouse=True)
def restore_config():
    """Config 为类级别状态，每个测试后还原"""
    saved = dict(vars(Config))
    dynamic = dict(Config._Config__config_dynamic)
    yield
    for key in list(vars(Config)):
        if key not in saved:
            delattr(Config, key)
    for key, value in saved.items():
        if not key.startswith('__') and getattr(Config, key, None) is not value:
            setattr(Config, key, value)
    Config._Config__config_dynamic.clear()
    Config._Config__config_dynamic.update(dynamic)


@pytest.fixture
def start_state():
    return tuple(range(1, 11))
