import pytest
from pydantic import ValidationError

from struct_builder.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STRUCT_BUILDER_OPTIONAL_WRAPPER", raising=False)
    monkeypatch.delenv("STRUCT_BUILDER_LOG_LEVEL", raising=False)

    settings = get_settings()

    assert settings.optional_wrapper == "Option"
    assert settings.log_level == "WARNING"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRUCT_BUILDER_OPTIONAL_WRAPPER", " Maybe ")
    monkeypatch.setenv("STRUCT_BUILDER_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.optional_wrapper == "Maybe"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("wrapper", ["", "Option<T>", "1Option", "a::"], ids=["empty", "generic", "digit", "trailing"])
def test_rejects_invalid_wrapper(wrapper: str) -> None:
    with pytest.raises(ValidationError):
        Settings(optional_wrapper=wrapper)


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")
