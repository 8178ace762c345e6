"""Cron restock endpoint and access gate tests."""

from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from restoman.core.config import Settings
from restoman.core.security import is_cron_request_authorized
from restoman.main import create_app

SECRET = "s3cret-token"


class FakeRunner:
    """Restock runner double that records how often it was called."""

    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.result = result if result is not None else {"success": True, "restocked": 0}
        self.error = error
        self.calls = 0

    def __call__(self) -> Any:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.result


def _build_client(tmp_path: Path, runner: FakeRunner, **overrides: Any) -> TestClient:
    values: dict[str, Any] = {
        "database_url": f"sqlite:///{tmp_path / 'cron.db'}",
        "cron_secret": None,
        "cron_require_secret": False,
    }
    values.update(overrides)
    return TestClient(create_app(Settings(**values), restock_runner=runner))


@pytest.mark.parametrize("token", ["wrong", "", "S3CRET-TOKEN", "s3cret-token-extra"])
def test_mismatched_token_is_rejected_without_running_job(tmp_path: Path, token: str) -> None:
    """Wrong cron token should return 401 and never run the job."""
    runner = FakeRunner()

    with _build_client(tmp_path, runner, cron_secret=SECRET) as client:
        response = client.get("/api/cron/restock", headers={"x-cron-auth-token": token})

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Unauthorized"}
    assert runner.calls == 0


def test_missing_token_is_rejected_when_secret_configured(tmp_path: Path) -> None:
    """Missing cron token should be rejected when a secret is set."""
    runner = FakeRunner()

    with _build_client(tmp_path, runner, cron_secret=SECRET) as client:
        response = client.post("/api/cron/restock")

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Unauthorized"}
    assert runner.calls == 0


def test_matching_token_runs_job_once(tmp_path: Path) -> None:
    """Correct cron token should run the job exactly once."""
    runner = FakeRunner({"success": True, "restocked": 1})

    with _build_client(tmp_path, runner, cron_secret=SECRET) as client:
        response = client.get("/api/cron/restock", headers={"x-cron-auth-token": SECRET})

    assert response.status_code == 200
    assert runner.calls == 1


@pytest.mark.parametrize("headers", [{}, {"x-cron-auth-token": "anything"}])
@pytest.mark.parametrize("method", ["GET", "POST"])
def test_without_secret_job_runs_regardless_of_header(tmp_path: Path, method: str, headers: dict[str, str]) -> None:
    """Without a secret the job should run for any header value."""
    runner = FakeRunner()

    with _build_client(tmp_path, runner) as client:
        response = client.request(method, "/api/cron/restock", headers=headers)

    assert response.status_code == 200
    assert runner.calls == 1


def test_success_result_is_passed_through_unchanged(tmp_path: Path) -> None:
    """Successful job result should be relayed as-is with 200."""
    runner = FakeRunner({"success": True, "restocked": 3})

    with _build_client(tmp_path, runner) as client:
        response = client.get("/api/cron/restock")

    assert response.status_code == 200
    assert response.json() == {"success": True, "restocked": 3}


def test_failure_result_maps_to_500_with_same_body(tmp_path: Path) -> None:
    """Failed job result should be relayed as-is with 500."""
    runner = FakeRunner({"success": False, "message": "db unreachable"})

    with _build_client(tmp_path, runner) as client:
        response = client.get("/api/cron/restock")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "db unreachable"}


def test_nested_result_fields_are_not_renamed(tmp_path: Path) -> None:
    """Nested result fields should reach the client untouched."""
    payload = {"success": True, "message": "ok", "results": {"dishes": 2, "variants": 0}, "restocked": 2}
    runner = FakeRunner(payload)

    with _build_client(tmp_path, runner) as client:
        response = client.get("/api/cron/restock")

    assert response.status_code == 200
    assert response.json() == payload


def test_raising_runner_returns_500_and_app_keeps_serving(tmp_path: Path) -> None:
    """A raising job should produce 500 and later calls still work."""
    runner = FakeRunner(error=RuntimeError("boom"))

    with _build_client(tmp_path, runner) as client:
        first = client.get("/api/cron/restock")
        runner.error = None
        runner.result = {"success": True, "restocked": 0}
        second = client.get("/api/cron/restock")

    assert first.status_code == 500
    assert first.json() == {"success": False, "message": "Server error during auto-restock"}
    assert second.status_code == 200
    assert runner.calls == 2


@pytest.mark.parametrize("bad_result", [{"restocked": 1}, {"success": "yes"}, None, "done"])
def test_malformed_result_is_treated_as_failure(tmp_path: Path, bad_result: Any) -> None:
    """Results without a boolean success flag should become 500."""
    runner = FakeRunner()
    runner.result = bad_result

    with _build_client(tmp_path, runner) as client:
        response = client.get("/api/cron/restock")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Server error during auto-restock"}


def test_require_secret_without_secret_fails_closed(tmp_path: Path) -> None:
    """Strict mode without a secret should reject every cron call."""
    runner = FakeRunner()

    with _build_client(tmp_path, runner, cron_require_secret=True) as client:
        response = client.get("/api/cron/restock", headers={"x-cron-auth-token": "anything"})

    assert response.status_code == 401
    assert runner.calls == 0


def test_gate_decisions() -> None:
    """Cron gate should accept or reject tokens according to settings."""
    open_settings = Settings(cron_secret=None, cron_require_secret=False)
    closed_settings = Settings(cron_secret=None, cron_require_secret=True)
    secret_settings = Settings(cron_secret=SECRET)

    assert is_cron_request_authorized(open_settings, None) is True
    assert is_cron_request_authorized(open_settings, "whatever") is True
    assert is_cron_request_authorized(closed_settings, SECRET) is False
    assert is_cron_request_authorized(secret_settings, SECRET) is True
    assert is_cron_request_authorized(secret_settings, None) is False
    assert is_cron_request_authorized(secret_settings, SECRET + "x") is False

    unicode_settings = Settings(cron_secret="café")
    assert is_cron_request_authorized(unicode_settings, "café") is True
    assert is_cron_request_authorized(unicode_settings, "café".encode("utf-8")) is True
    assert is_cron_request_authorized(unicode_settings, "café".encode("latin-1")) is False
    assert is_cron_request_authorized(unicode_settings, "cafe") is False


def test_non_ascii_secret_matches_utf8_header_bytes(tmp_path: Path) -> None:
    """A non-ASCII secret sent as its UTF-8 bytes should be accepted."""
    runner = FakeRunner()

    with _build_client(tmp_path, runner, cron_secret="café") as client:
        accepted = client.get("/api/cron/restock", headers={"x-cron-auth-token": "café".encode("utf-8")})
        rejected = client.get("/api/cron/restock", headers={"x-cron-auth-token": "café".encode("latin-1")})

    assert accepted.status_code == 200
    assert rejected.status_code == 401
    assert runner.calls == 1
