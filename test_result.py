from http import HTTPStatus

import pytest

from utils.result import Result


class TestResult:
    """
    Tests for the Result success/failure carrier.
    """

    @pytest.mark.parametrize(
        "factory, expected_status",
        [
            (lambda: Result.ok(5), HTTPStatus.OK),
            (lambda: Result.fail("bad"), HTTPStatus.BAD_REQUEST),
            (lambda: Result.not_found("missing"), HTTPStatus.NOT_FOUND),
            (lambda: Result.invalid_input("invalid"), HTTPStatus.BAD_REQUEST),
            (lambda: Result.server_error("boom"), HTTPStatus.INTERNAL_SERVER_ERROR),
            (lambda: Result.fail("teapot", status_code=418), HTTPStatus.IM_A_TEAPOT),
        ],
        ids=["ok", "fail", "not-found", "invalid-input", "server-error", "int-status"]
    )
    def test_factories_set_status_code(self, factory, expected_status):
        """
        Test that each factory sets the expected HTTPStatus.

        Args:
            factory: Callable building the Result
            expected_status: Expected status code
        """
        assert factory().status_code == expected_status

    def test_and_then_chains_successes(self):
        """
        Test that and_then feeds the value into the next step.
        """
        result = Result.ok([3, 1, 2]).and_then(lambda numbers: Result.ok(min(numbers)))

        assert result.is_success()
        assert result.data == 1

    def test_and_then_short_circuits_failures(self):
        """
        Test that a failure keeps its error and status and skips the next step.
        """
        calls = []
        result = Result.not_found("gone").and_then(lambda value: calls.append(value) or Result.ok(value))

        assert result.is_failure()
        assert result.error == "gone"
        assert result.status_code == HTTPStatus.NOT_FOUND
        assert calls == []

    def test_error_message_prefixes_message(self):
        """
        Test that the client-facing error text carries the "Error: " prefix.
        """
        assert Result.invalid_input("N must be between 1 and 3").error_message() == "Error: N must be between 1 and 3"
        assert Result.fail("").error_message() == "Error: Operation failed"
