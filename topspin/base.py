import os
import logging
from logging.handlers import RotatingFileHandler
from functools import wraps


def get_root_logging(file_name="logs/topspin.log", level: int | str = logging.WARNING,
                     _format: str = "%(asctime)s - %(levelname)s - %(message)s"):
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 如果已有 handler，就不重复添加
    if root_logger.handlers:
        return root_logger

    formatter = logging.Formatter(_format)
    console_handler = logging.StreamHandler()  # 控制台输出
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if file_name:
        _dir = os.path.dirname(file_name)
        if _dir:
            os.makedirs(_dir, exist_ok=True)
        file_handler = RotatingFileHandler(file_name, maxBytes=1_000_000, backupCount=3, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    return root_logger


def error_logger(extra_msg=None, expected: tuple = ()):
    """
    错误日志装饰器 @error_logger()
    记录异常及堆栈后重新抛出，不吞掉异常
    expected 中的异常属于可预期的使用错误，只记 warning，不打印堆栈
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except expected as e:
                logging.warning(f"{func.__name__}: {e}")
                raise
            except Exception as e:
                msg = f"Error in {func.__name__}: {e}"
                if extra_msg:
                    msg += f" | Extra: {extra_msg}"
                logging.error(msg, exc_info=True)
                raise

        return wrapper

    return decorator


def chainable_method(func):
    """装饰器，使方法支持链式调用，保留显式返回值"""

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        result = func(self, *args, **kwargs)
        return self if result is None else result

    return wrapper
