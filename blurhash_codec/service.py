import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

from .decoder import BlurHashDecoder
from .pixels import PixelBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeRequest:
    """Everything needed to decode one placeholder."""

    hash: str
    width: int = BlurHashDecoder.DEFAULT_SIZE
    height: int = BlurHashDecoder.DEFAULT_SIZE
    punch: float = 1.0


class DecodeService:
    """
    Runs decodes on a background thread pool.

    Errors raised by the decoder are delivered through the returned future.
    """

    def __init__(self, max_workers: int = None):
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="blurhash-decode"
        )

    def submit(self, request: DecodeRequest) -> Future:
        logger.debug("Submitting decode of %r at %dx%d", request.hash, request.width, request.height)
        return self._executor.submit(
            BlurHashDecoder.decode,
            request.hash,
            request.width,
            request.height,
            request.punch,
        )

    def decode(self, request: DecodeRequest) -> PixelBuffer:
        return self.submit(request).result()

    def shutdown(self, wait: bool = True):
        self._executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.shutdown()


class DecodeSlot:
    """
    Holds the latest decode for one consumer.

    Submitting a new request supersedes the previous one: a pending decode
    is cancelled, a running one is left to finish but its result is no
    longer reachable through the slot.
    """

    def __init__(self, service: DecodeService):
        self._service = service
        self._lock = threading.Lock()
        self.current = None
        self.future = None

    def request(self, request: DecodeRequest) -> Future:
        with self._lock:
            if (
                self.future is not None
                and request == self.current
                and not self.future.cancelled()
            ):
                return self.future

            if self.future is not None and not self.future.done():
                cancelled = self.future.cancel()
                logger.debug("Superseded decode of %r (cancelled=%s)", self.current.hash, cancelled)

            self.current = request
            self.future = self._service.submit(request)
            return self.future

    @property
    def decoded(self) -> bool:
        """True once the current request finished without error."""
        with self._lock:
            future = self.future
        return (
            future is not None
            and future.done()
            and not future.cancelled()
            and future.exception() is None
        )

    def result(self, timeout: float = None) -> PixelBuffer:
        with self._lock:
            future = self.future
        if future is None:
            raise RuntimeError("DecodeSlot.result: No decode has been requested")
        return future.result(timeout=timeout)
