import logging

import pytest

from model_interchange.config import get_settings
from model_interchange.core.errors import (
    ConversionNotImplementedError,
    DataFormatError,
    ElementNotFoundError,
    JmiError,
)
from model_interchange.logging_setup import configure_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_LEVEL", "SEED_FILE", "KEY_FIELD", "UNIQUE_FIELD"):
        monkeypatch.delenv(f"MODEL_INTERCHANGE_{name}", raising=False)

    settings = get_settings()

    assert settings.log_level == "INFO"
    assert settings.seed_file is None
    assert settings.key_field == "id"
    assert settings.unique_field == "id"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODEL_INTERCHANGE_LOG_LEVEL", "debug")
    monkeypatch.setenv("MODEL_INTERCHANGE_SEED_FILE", "/tmp/seed.json")
    monkeypatch.setenv("MODEL_INTERCHANGE_KEY_FIELD", "_id")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.seed_file == "/tmp/seed.json"
    assert settings.key_field == "_id"
    assert settings.unique_field == "id"


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("DEBUG")
        assert root.level == logging.DEBUG
        configure_logging("not-a-level")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


@pytest.mark.parametrize(
    ("error", "status", "kind"),
    [
        (DataFormatError("bad"), 400, "invalid_format"),
        (ElementNotFoundError("missing"), 404, "not_found"),
        (ConversionNotImplementedError("later"), 501, "not_implemented"),
    ],
)
def test_error_kinds_map_to_status_codes(error: JmiError, status: int, kind: str) -> None:
    assert error.status_code == status
    assert error.to_dict() == {"error": kind, "message": str(error)}
