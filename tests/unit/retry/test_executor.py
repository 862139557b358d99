r"""Unit tests for the retry loop."""

from __future__ import annotations

import logging
from unittest.mock import Mock, patch

import httpx
import pytest

from jamfpro.backoff import ConstantBackoff
from jamfpro.callbacks import RetryInfo
from jamfpro.core.config import ClientConfig
from jamfpro.core.request_spec import HttpMethod, RequestSpec
from jamfpro.core.uri import Uri
from jamfpro.exceptions import TransportError
from jamfpro.retry import RetryDecider, RetryExecutor, RetryStrategy
from jamfpro.retry.executor import discard_response

TEST_URL = "https://example.jamfcloud.com/JSSResource/packages/id/1"
SPEC = RequestSpec(HttpMethod.GET, Uri("/packages/id/1"), (200,))


def create_mock_response(status_code: int) -> Mock:
    return Mock(spec=httpx.Response, status_code=status_code, headers=httpx.Headers())


def create_executor(**kwargs) -> RetryExecutor:  # noqa: ANN003
    kwargs.setdefault("backoff_strategy", ConstantBackoff(0.5))
    return RetryExecutor(ClientConfig(**kwargs))


@pytest.fixture
def request_() -> httpx.Request:
    return httpx.Request("GET", TEST_URL)


######################################
#     Tests for discard_response     #
######################################


def test_discard_response() -> None:
    """Test that the body is drained and closed."""
    response = create_mock_response(503)
    discard_response(response)
    response.read.assert_called_once_with()
    response.close.assert_called_once_with()


def test_discard_response_read_error() -> None:
    """Test that a drain failure is logged and the response still
    closed."""
    response = create_mock_response(503)
    response.read.side_effect = httpx.ReadError("connection reset")
    log = Mock(spec=logging.Logger)
    discard_response(response, log)
    response.close.assert_called_once_with()
    log.debug.assert_called_once_with(
        "Error draining response body before retry: connection reset"
    )


###################################
#     Tests for RetryExecutor     #
###################################


def test_retry_executor_creation() -> None:
    """Test that the executor is built from the config."""
    on_request, on_retry = Mock(), Mock()
    executor = RetryExecutor(
        ClientConfig(
            max_retries=2,
            max_total_time=10.0,
            max_wait_time=3.0,
            retry_status_codes=(503,),
            on_request=on_request,
            on_retry=on_retry,
        )
    )
    assert executor.max_retries == 2
    assert executor.max_total_time == 10.0
    assert executor.on_request is on_request
    assert executor.on_retry is on_retry
    assert isinstance(executor.decider, RetryDecider)
    assert executor.decider.retry_status_codes == (503,)
    assert isinstance(executor.strategy, RetryStrategy)
    assert executor.strategy.max_wait_time == 3.0
    assert executor.logger is logging.getLogger("jamfpro.retry.executor")


def test_retry_executor_success(mock_sleep: Mock, request_: httpx.Request) -> None:
    """Test that a successful first attempt is returned as-is."""
    response = create_mock_response(200)
    send = Mock(return_value=response)
    assert create_executor().execute(send, request_, SPEC) is response
    send.assert_called_once_with(request_)
    response.close.assert_not_called()
    mock_sleep.assert_not_called()


def test_retry_executor_returns_last_response_unvalidated(
    mock_sleep: Mock, request_: httpx.Request
) -> None:
    """Test that a non-retryable failure is returned, not raised."""
    response = create_mock_response(403)
    assert create_executor().execute(Mock(return_value=response), request_, SPEC) is response
    response.close.assert_not_called()
    mock_sleep.assert_not_called()


def test_retry_executor_retries_and_discards(mock_sleep: Mock, request_: httpx.Request) -> None:
    """Test that retried responses are drained and closed, and the last
    one left open."""
    first, second, last = (create_mock_response(code) for code in (503, 500, 200))
    send = Mock(side_effect=[first, second, last])
    assert create_executor().execute(send, request_, SPEC) is last
    assert send.call_count == 3
    for response in (first, second):
        response.read.assert_called_once_with()
        response.close.assert_called_once_with()
    last.read.assert_not_called()
    last.close.assert_not_called()
    assert mock_sleep.call_args_list == [((0.5,),), ((0.5,),)]


def test_retry_executor_exhausted(mock_sleep: Mock, request_: httpx.Request) -> None:
    """Test that max_retries + 1 attempts are made and the last response
    returned."""
    responses = [create_mock_response(503) for _ in range(3)]
    send = Mock(side_effect=responses)
    assert create_executor(max_retries=2).execute(send, request_, SPEC) is responses[-1]
    assert send.call_count == 3
    responses[-1].close.assert_not_called()
    assert mock_sleep.call_count == 2


def test_retry_executor_zero_retries(mock_sleep: Mock, request_: httpx.Request) -> None:
    send = Mock(return_value=create_mock_response(503))
    create_executor(max_retries=0).execute(send, request_, SPEC)
    send.assert_called_once()
    mock_sleep.assert_not_called()


def test_retry_executor_consistency_failure(mock_sleep: Mock, request_: httpx.Request) -> None:
    """Test that the consistency predicate of the spec drives retries."""
    spec = RequestSpec(
        HttpMethod.DELETE,
        Uri("/packages/id/1"),
        (200,),
        consistency_failure_func=lambda r: r.status_code == 404,
    )
    last = create_mock_response(200)
    send = Mock(side_effect=[create_mock_response(404), last])
    assert create_executor().execute(send, request_, spec) is last
    mock_sleep.assert_called_once_with(0.5)


def test_retry_executor_consistency_failure_raises(mock_sleep: Mock, request_: httpx.Request) -> None:
    """Test that the response is closed when the consistency predicate
    raises."""
    spec = RequestSpec(
        HttpMethod.GET,
        Uri("/packages/id/1"),
        (200,),
        consistency_failure_func=Mock(side_effect=KeyError("status")),
    )
    response = create_mock_response(404)
    send = Mock(return_value=response)
    with pytest.raises(KeyError, match=r"status"):
        create_executor().execute(send, request_, spec)
    response.close.assert_called_once_with()
    send.assert_called_once_with(request_)
    mock_sleep.assert_not_called()


def test_retry_executor_disable_retries(mock_sleep: Mock, request_: httpx.Request) -> None:
    response = create_mock_response(503)
    send = Mock(return_value=response)
    assert create_executor().execute(send, request_, SPEC, disable_retries=True) is response
    send.assert_called_once()
    mock_sleep.assert_not_called()


def test_retry_executor_nil_response(mock_sleep: Mock, request_: httpx.Request) -> None:
    """Test that a send returning nothing stops the loop."""
    send = Mock(return_value=None)
    assert create_executor().execute(send, request_, SPEC) is None
    send.assert_called_once()
    mock_sleep.assert_not_called()


def test_retry_executor_transport_error_then_success(
    mock_sleep: Mock, request_: httpx.Request
) -> None:
    response = create_mock_response(200)
    send = Mock(side_effect=[httpx.ConnectError("refused"), response])
    assert create_executor().execute(send, request_, SPEC) is response
    mock_sleep.assert_called_once_with(0.5)


def test_retry_executor_transport_error_exhausted(
    mock_sleep: Mock, request_: httpx.Request
) -> None:
    """Test that the last transport error is raised with the request
    context."""
    error = httpx.ReadError("connection reset")
    send = Mock(side_effect=[httpx.ConnectError("refused"), error])
    with pytest.raises(
        TransportError,
        match=rf"GET {TEST_URL}: request failed after 2 attempts: connection reset",
    ) as exc_info:
        create_executor(max_retries=1).execute(send, request_, SPEC)
    assert exc_info.value.method == "GET"
    assert exc_info.value.url == TEST_URL
    assert exc_info.value.cause is error
    assert exc_info.value.__cause__ is error
    mock_sleep.assert_called_once()


def test_retry_executor_timeout(mock_sleep: Mock, request_: httpx.Request) -> None:
    send = Mock(side_effect=httpx.ReadTimeout("timed out"))
    with pytest.raises(TransportError, match=r"request timed out \(3 attempts\)"):
        create_executor(max_retries=2).execute(send, request_, SPEC)
    assert send.call_count == 3
    assert mock_sleep.call_count == 2


def test_retry_executor_non_retryable_error(mock_sleep: Mock, request_: httpx.Request) -> None:
    send = Mock(side_effect=httpx.UnsupportedProtocol("ftp"))
    with pytest.raises(TransportError, match=r"request failed after 1 attempts"):
        create_executor().execute(send, request_, SPEC)
    send.assert_called_once()
    mock_sleep.assert_not_called()


def test_retry_executor_other_errors_propagate(mock_sleep: Mock, request_: httpx.Request) -> None:
    """Test that errors other than transport errors are not caught."""
    send = Mock(side_effect=RuntimeError("bug"))
    with pytest.raises(RuntimeError, match=r"bug"):
        create_executor().execute(send, request_, SPEC)
    send.assert_called_once()
    mock_sleep.assert_not_called()


def test_retry_executor_max_total_time(mock_sleep: Mock, request_: httpx.Request) -> None:
    """Test that no retry starts once the time budget would be
    exceeded."""
    first, second = create_mock_response(503), create_mock_response(503)
    send = Mock(side_effect=[first, second])
    executor = create_executor(max_total_time=10.0, backoff_strategy=ConstantBackoff(4.0))
    with patch("time.monotonic", side_effect=[0.0, 1.0, 7.0]):
        assert executor.execute(send, request_, SPEC) is second
    assert send.call_count == 2
    mock_sleep.assert_called_once_with(4.0)
    second.close.assert_not_called()


def test_retry_executor_max_total_time_transport_error(
    mock_sleep: Mock, request_: httpx.Request
) -> None:
    send = Mock(side_effect=httpx.ConnectError("refused"))
    executor = create_executor(max_total_time=1.0, backoff_strategy=ConstantBackoff(4.0))
    with pytest.raises(TransportError, match=r"request failed after 1 attempts: refused"):
        executor.execute(send, request_, SPEC)
    mock_sleep.assert_not_called()


def test_retry_executor_on_request(
    mock_sleep: Mock, mock_callback: Mock, request_: httpx.Request
) -> None:
    send = Mock(side_effect=[create_mock_response(503), create_mock_response(200)])
    create_executor(on_request=mock_callback).execute(send, request_, SPEC)
    assert [item.args[0].attempt for item in mock_callback.call_args_list] == [1, 2]
    mock_sleep.assert_called_once()


def test_retry_executor_on_retry_transport_error(
    mock_sleep: Mock, mock_callback: Mock, request_: httpx.Request
) -> None:
    """Test that on_retry receives the error of the failed attempt."""
    error = httpx.ConnectError("refused")
    send = Mock(side_effect=[error, create_mock_response(200)])
    create_executor(on_retry=mock_callback, max_retries=3).execute(send, request_, SPEC)
    mock_callback.assert_called_once_with(
        RetryInfo(
            url=TEST_URL,
            method="GET",
            attempt=2,
            max_retries=3,
            wait_time=0.5,
            reason="ConnectError",
            error=error,
            status_code=None,
        )
    )
    mock_sleep.assert_called_once_with(0.5)


def test_retry_executor_on_retry_not_called_without_retry(
    mock_sleep: Mock, mock_callback: Mock, request_: httpx.Request
) -> None:
    send = Mock(return_value=create_mock_response(200))
    create_executor(on_retry=mock_callback).execute(send, request_, SPEC)
    mock_callback.assert_not_called()
    mock_sleep.assert_not_called()


def test_retry_executor_logs_retry(
    mock_sleep: Mock, request_: httpx.Request, caplog: pytest.LogCaptureFixture
) -> None:
    send = Mock(side_effect=[create_mock_response(503), create_mock_response(200)])
    with caplog.at_level(logging.DEBUG, logger="jamfpro.retry.executor"):
        create_executor().execute(send, request_, SPEC)
    assert (
        f"GET request to {TEST_URL} will be retried in 0.50s (attempt 2/5, status 503)"
        in caplog.text
    )
    mock_sleep.assert_called_once()
