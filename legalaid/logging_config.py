"""Logging setup and a latency-logging decorator for provider and extraction calls."""

import asyncio
import logging
import time
from functools import wraps
from typing import Callable, Union

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
NOISY_LOGGERS = ("httpx", "httpcore", "google_genai", "multipart")


def setup_logging(level: Union[int, str] = logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _report(logger: logging.Logger, operation: str, started: float, error: Exception = None):
    latency_ms = (time.perf_counter() - started) * 1000
    if error is None:
        logger.info(f"{operation} | latency_ms={latency_ms:.2f} | status=success")
    else:
        logger.error(f"{operation} | latency_ms={latency_ms:.2f} | status=error | error={error}")


def log_latency(operation: str):
    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _report(logger, operation, started, e)
                raise
            _report(logger, operation, started)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _report(logger, operation, started, e)
                raise
            _report(logger, operation, started)
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
