"""Unit tests for utility modules and error types."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock, patch

import pytest

from meilibatches.errors import (
    BatchNotFoundError,
    DecodeError,
    HttpStatusError,
    MeilisearchClientError,
    TransportError,
)
from meilibatches.utils.logger import configure_logging, get_logger
from meilibatches.utils.retry import retry_with_logging

if TYPE_CHECKING:
    from collections.abc import Callable

# ──────────────────────────────────────────────────────────────────────
# utils/retry.py
# ──────────────────────────────────────────────────────────────────────


class TestRetryWithLogging:
    """Tests for retry_with_logging."""

    @staticmethod
    def _flaky(outcomes: list[object]) -> tuple[list[int], Callable[[], object]]:
        """Return a call log and a function replaying ``outcomes`` in order."""
        calls: list[int] = []

        def fetch() -> object:
            calls.append(1)
            outcome = outcomes[len(calls) - 1]
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        return calls, fetch

    def test_returns_on_first_success(self) -> None:
        calls, fetch = self._flaky(["ok"])
        assert retry_with_logging(max_attempts=3)(fetch)() == "ok"
        assert len(calls) == 1

    @patch("time.sleep")
    def test_retries_transport_errors(self, _sleep: MagicMock) -> None:
        calls, fetch = self._flaky([TransportError("down"), TransportError("down"), "ok"])
        assert retry_with_logging(max_attempts=3)(fetch)() == "ok"
        assert len(calls) == 3

    @patch("time.sleep")
    def test_reraises_after_last_attempt(self, _sleep: MagicMock) -> None:
        calls, fetch = self._flaky([TransportError("down"), TransportError("down")])
        with pytest.raises(TransportError, match="down"):
            retry_with_logging(max_attempts=2)(fetch)()
        assert len(calls) == 2

    def test_does_not_retry_status_errors(self) -> None:
        calls, fetch = self._flaky([HttpStatusError(500, ""), "ok"])
        with pytest.raises(HttpStatusError):
            retry_with_logging(max_attempts=3)(fetch)()
        assert len(calls) == 1


# ──────────────────────────────────────────────────────────────────────
# utils/logger.py
# ──────────────────────────────────────────────────────────────────────


class TestLogger:
    """Tests for configure_logging and get_logger."""

    def test_configure_and_log(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("INFO")
        get_logger("test").info("batches_fetched", count=2)

        assert "batches_fetched" in capsys.readouterr().err

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("WARNING")
        get_logger("test").debug("hidden_event")

        assert "hidden_event" not in capsys.readouterr().err


# ──────────────────────────────────────────────────────────────────────
# errors.py
# ──────────────────────────────────────────────────────────────────────


class TestErrors:
    """Error taxonomy."""

    def test_status_error_parses_meilisearch_body(self) -> None:
        body = (
            '{"message": "Invalid API key", "code": "invalid_api_key",'
            ' "type": "auth", "link": "https://docs.meilisearch.com/errors#invalid_api_key"}'
        )
        error = HttpStatusError(403, body)

        assert error.status_code == 403
        assert error.code == "invalid_api_key"
        assert error.error_type == "auth"
        assert error.link is not None
        assert str(error) == "HTTP 403: Invalid API key"

    def test_status_error_with_plain_body(self) -> None:
        error = HttpStatusError(502, "Bad Gateway")

        assert error.code is None
        assert error.body == "Bad Gateway"
        assert str(error) == "HTTP 502: Bad Gateway"

    def test_status_error_with_non_object_json(self) -> None:
        assert HttpStatusError(500, "[1, 2]").message is None

    def test_not_found_is_a_status_error(self) -> None:
        error = BatchNotFoundError(99, '{"message": "Batch `99` not found."}')

        assert isinstance(error, HttpStatusError)
        assert error.status_code == 404
        assert error.uid == 99

    @pytest.mark.parametrize(
        "error",
        [TransportError("x"), HttpStatusError(500, ""), DecodeError("x", "{}")],
    )
    def test_common_base(self, error: Exception) -> None:
        assert isinstance(error, MeilisearchClientError)
