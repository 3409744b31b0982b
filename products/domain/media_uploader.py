"""
Media uploader: pushes product images to the hosting service.

The storage reports completion through a callback. The uploader bridges
that callback into a single-settlement future and waits on it with a
timeout, so a callback that never fires cannot hang the request.
"""

import logging
import threading
import time
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Any, Optional

from infrastructure.storage import StorageFile, StorageInterface

from ..infra.observability.metrics import image_upload_duration
from .base import BaseService
from .config import DEFAULT_UPLOAD_FOLDER, DEFAULT_UPLOAD_TIMEOUT
from .draft import ImagePayload
from .exceptions import UploadError

logger = logging.getLogger(__name__)


class UploadTimeoutError(UploadError):
    """The hosting service did not report completion in time."""


class SingleSettlementFuture:
    """
    A future that settles exactly once.

    The first call to ``resolve`` or ``reject`` wins; later calls are
    ignored and return False. Safe to call from any thread, including
    from inside the call that started the operation.
    """

    def __init__(self):
        self._future: Future = Future()
        self._lock = threading.Lock()

    @property
    def settled(self) -> bool:
        return self._future.done()

    def resolve(self, value: Any) -> bool:
        with self._lock:
            if self._future.done():
                logger.debug("Ignoring resolve on an already settled future")
                return False
            self._future.set_result(value)
            return True

    def reject(self, error: BaseException) -> bool:
        with self._lock:
            if self._future.done():
                logger.debug(f"Ignoring reject on an already settled future: {error}")
                return False
            self._future.set_exception(error)
            return True

    def wait(self, timeout: Optional[float]) -> Any:
        """
        Block until settled, then return the value or raise the error.

        If nothing settles the future within ``timeout`` seconds it is
        rejected with UploadTimeoutError, so a late callback has no effect.
        """
        try:
            return self._future.result(timeout=timeout)
        except FuturesTimeoutError:
            if self.reject(UploadTimeoutError(f"Image upload did not complete within {timeout:g}s")):
                logger.warning(f"Image upload timed out after {timeout:g}s")
        return self._future.result()


class MediaUploader(BaseService):
    """
    Upload product images and return their public URL.

    Args:
        storage: Image hosting storage
        folder: Logical folder every image is stored under
        timeout: Seconds to wait for the hosting service before failing
    """

    def __init__(
        self,
        storage: StorageInterface,
        folder: str = DEFAULT_UPLOAD_FOLDER,
        timeout: float = DEFAULT_UPLOAD_TIMEOUT,
    ):
        super().__init__()
        if timeout is None or timeout <= 0:
            raise ValueError("Upload timeout must be a positive number of seconds")
        self.storage = storage
        self.folder = folder
        self.timeout = timeout

    @BaseService.log_performance
    def upload(self, image: ImagePayload) -> str:
        """
        Upload an image.

        Returns:
            Public URL of the stored image

        Raises:
            UploadError: If the upload fails, times out or yields no URL
        """
        settlement = SingleSettlementFuture()

        def on_complete(error: Optional[BaseException], stored: Optional[StorageFile]):
            if error is not None:
                settlement.reject(error)
            elif stored is None or not stored.url:
                settlement.reject(UploadError("Image hosting returned no URL"))
            else:
                settlement.resolve(stored.url)

        start_time = time.monotonic()
        try:
            try:
                self.storage.upload_stream(
                    image.content,
                    folder=self.folder,
                    callback=on_complete,
                    content_type=image.content_type,
                    filename=image.filename,
                )
            except Exception as e:
                settlement.reject(e)

            url = settlement.wait(self.timeout)

        except UploadError:
            raise
        except Exception as e:
            raise UploadError(f"Image upload failed: {str(e)}") from e
        finally:
            image_upload_duration.observe(time.monotonic() - start_time)

        self.logger.info(f"Uploaded product image ({image.size} bytes) to {url}")
        return url
