"""
Base classes and utilities for the product service layer.
"""

import logging
import time
from functools import wraps
from typing import Callable

from .exceptions import IngestionError


class BaseService:
    """
    Base class for product services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class CatalogWriter(BaseService):
            def __init__(self, provider):
                super().__init__()
                self.provider = provider

            @BaseService.log_performance
            def write(self, draft):
                self.logger.info(f"Writing product {draft.name}")
    """

    def __init__(self):
        """Initialize base service with logger."""
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log performance of service methods.

        Expected pipeline failures (IngestionError) are logged as warnings
        without a traceback; anything else is logged as an error with one.
        The exception is always re-raised.
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000  # Convert to ms
                self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")
                return result

            except IngestionError as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.warning(
                    f"{method_name} failed with {type(e).__name__} after {elapsed_time:.2f}ms: {e.message}"
                )
                raise

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper
