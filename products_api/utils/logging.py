from loguru import logger
import sys
import time
from pathlib import Path
from typing import Union

from fastapi import Request

from products_api.config import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

# file name -> (level, rotation, retention)
FILE_SINKS = {
    "app.log": (LOG_LEVEL, "500 MB", "10 days"),
    "error.log": ("ERROR", "100 MB", "30 days"),
}


class AppLogger:
    """Console sink always; rotating app/error files when LOG_DIR is set"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        logger.remove()
        logger.add(sys.stdout, colorize=True, format=CONSOLE_FORMAT, level=LOG_LEVEL)

        if not LOG_DIR:
            return

        self.log_path = Path(LOG_DIR)
        self.log_path.mkdir(parents=True, exist_ok=True)
        for filename, (level, rotation, retention) in FILE_SINKS.items():
            logger.add(
                self.log_path / filename,
                rotation=rotation,
                retention=retention,
                compression="zip",
                format=FILE_FORMAT,
                level=level,
            )

    @staticmethod
    def get_logger(name: Union[str, None] = None):
        return logger.bind(module=name if name else "app")

app_logger = AppLogger()

def get_logger(name: Union[str, None] = None):
    return app_logger.get_logger(name)


_access_logger = get_logger("access")


def _log_access(request: Request, status_code: int, start: float):
    _access_logger.info(
        "{} {} {} - {:.3f} ms",
        request.method,
        request.url.path,
        status_code,
        (time.perf_counter() - start) * 1000,
    )


async def log_requests(request: Request, call_next):
    """Access log line per request, failed ones included"""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        _log_access(request, 500, start)
        raise
    _log_access(request, response.status_code, start)
    return response
