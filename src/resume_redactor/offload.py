"""Off-context detection for large documents.

Detection is synchronous and CPU-bound.  For long inputs a caller that must
stay responsive can hand the work to an executor instead:

    offload = OffloadedDetector(Detector())
    response = offload.submit(text, rules)
    if response.error:
        show_retry(response.error)      # zero findings, keep the text
    else:
        review(response.findings)

Short documents run inline.  If the executor does not answer within the
timeout the same pure function is run inline instead.
"""

from __future__ import annotations
import itertools
import logging
from concurrent.futures import Executor, ThreadPoolExecutor, TimeoutError as FutureTimeout
from dataclasses import dataclass, field
from typing import Iterable

from .detector import Detector
from .errors import RedactorError
from .types import CustomRule, Finding

logger = logging.getLogger(__name__)

LARGE_DOCUMENT_THRESHOLD = 5000   # chars; longer inputs go to the executor
DEFAULT_TIMEOUT = 10.0            # seconds before falling back inline


@dataclass(frozen=True)
class DetectionRequest:
    id: int
    text: str
    rules: tuple[CustomRule, ...] = ()


@dataclass
class DetectionResponse:
    id: int
    findings: list[Finding] = field(default_factory=list)
    skipped_rules: list[tuple[str, str]] = field(default_factory=list)
    error: str | None = None
    offloaded: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def handle_request(detector: Detector, request: DetectionRequest) -> DetectionResponse:
    """Run one request to completion; detection errors become ``error``."""
    try:
        result = detector.detect(request.text, request.rules)
    except RedactorError as e:
        return DetectionResponse(id=request.id, error=str(e))
    return DetectionResponse(
        id=request.id,
        findings=result.findings,
        skipped_rules=result.skipped_rules,
    )


class OffloadedDetector:
    """Request/response front for a Detector with timeout fallback."""

    def __init__(
        self,
        detector: Detector | None = None,
        *,
        executor: Executor | None = None,
        threshold: int = LARGE_DOCUMENT_THRESHOLD,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.detector = detector or Detector()
        self.threshold = threshold
        self.timeout = timeout
        self._executor = executor
        self._owns_executor = executor is None
        self._ids = itertools.count()

    def _get_executor(self) -> Executor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pii-detect")
        return self._executor

    def submit(self, text: str, rules: Iterable[CustomRule] = ()) -> DetectionResponse:
        request = DetectionRequest(id=next(self._ids), text=text, rules=tuple(rules))
        if not isinstance(text, str) or len(text) <= self.threshold:
            return handle_request(self.detector, request)

        future = self._get_executor().submit(handle_request, self.detector, request)
        try:
            response = future.result(timeout=self.timeout)
        except FutureTimeout:
            logger.warning(
                "Detection request %d timed out after %.1fs, running inline",
                request.id, self.timeout,
            )
            if not future.cancel():
                self._abandon_executor(request.id)
            return handle_request(self.detector, request)
        response.offloaded = True
        return response

    def _abandon_executor(self, request_id: int) -> None:
        """Drop a worker still busy with a timed-out request.

        Later requests would otherwise queue behind it.  An executor passed
        in by the caller is not ours to replace.
        """
        if not self._owns_executor:
            logger.warning(
                "Detection request %d could not be cancelled; the executor stays busy", request_id,
            )
            return
        logger.warning(
            "Detection request %d could not be cancelled; starting a fresh executor", request_id,
        )
        self._executor.shutdown(wait=False)
        self._executor = None

    def close(self) -> None:
        if self._executor is not None and self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None

    def __enter__(self) -> "OffloadedDetector":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
