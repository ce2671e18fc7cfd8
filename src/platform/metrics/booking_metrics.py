from collections.abc import Iterator
from contextlib import contextmanager
import time

from prometheus_client import Counter, Histogram

from src.platform.exception.exceptions import CannotBookError, NotFoundError


class BookingMetrics:
    """
    Booking Service Metrics Collector

    Tracks request outcomes (success / cannot_book / not_found / error) and
    latency per booking operation (get / create / change)
    """

    def __init__(self) -> None:
        self.booking_requests = Counter(
            'booking_requests_total',
            'Total booking requests',
            ['operation', 'result'],
        )

        self.booking_request_duration = Histogram(
            'booking_request_duration_seconds',
            'Booking request processing time',
            ['operation'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

    def record_request(self, *, operation: str, result: str, duration: float) -> None:
        self.booking_requests.labels(operation=operation, result=result).inc()
        self.booking_request_duration.labels(operation=operation).observe(duration)

    @contextmanager
    def track_request(self, *, operation: str) -> Iterator[None]:
        """Classify the outcome of the wrapped block; exceptions are re-raised untouched."""
        start = time.perf_counter()
        result = 'success'
        try:
            yield
        except CannotBookError:
            result = 'cannot_book'
            raise
        except NotFoundError:
            result = 'not_found'
            raise
        except Exception:
            result = 'error'
            raise
        finally:
            self.record_request(
                operation=operation, result=result, duration=time.perf_counter() - start
            )


# Global metrics instance
metrics = BookingMetrics()
