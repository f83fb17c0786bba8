"""Testes para os resultados tipados Ok/Fail."""

from __future__ import annotations

import pytest

from tightknit.app.domain.results import Fail, FailureKind, Ok, unwrap
from tightknit.utils.errors import ApiError, NetworkError, TightknitError


class TestOk:
    def test_envelope_helpers(self) -> None:
        result = Ok({"success": True, "data": {"records": [{"id": 1}], "total": 7}})
        assert result.success is True
        assert result.records == [{"id": 1}]
        assert result.total == 7

    def test_helpers_tolerate_non_envelope(self) -> None:
        result = Ok("plain text body")
        assert result.data is None
        assert result.records == []
        assert result.total == 0

    def test_total_falls_back_to_record_count(self) -> None:
        result = Ok({"data": {"records": [1, 2]}})
        assert result.total == 2


class TestUnwrap:
    def test_unwrap_ok_returns_value(self) -> None:
        assert unwrap(Ok({"a": 1})) == {"a": 1}

    def test_unwrap_api_failure_raises_api_error(self) -> None:
        failure = Fail(FailureKind.API_ERROR, "API Error (404): Not found", status_code=404)
        assert failure.success is False
        with pytest.raises(ApiError, match="Not found") as exc_info:
            unwrap(failure)
        assert exc_info.value.status_code == 404
        assert isinstance(exc_info.value, TightknitError)

    def test_unwrap_network_failure_raises_network_error(self) -> None:
        failure = Fail(FailureKind.NETWORK_ERROR, "Network Error: Connection failed")
        with pytest.raises(NetworkError, match="Connection failed"):
            unwrap(failure)

    def test_unwrap_network_failure_carries_cause(self) -> None:
        failure = Fail(
            FailureKind.NETWORK_ERROR,
            "Network Error: Connection refused",
            cause="Connection refused",
        )
        with pytest.raises(NetworkError) as exc_info:
            unwrap(failure)
        assert exc_info.value.cause == "Connection refused"
