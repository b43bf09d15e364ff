"""Unit tests for engine option resolution."""

from __future__ import annotations

import pytest

from specfilter.errors import ConfigurationError
from specfilter.options import FilterOptions, coerce_options, load_options


@pytest.mark.unit
def test_defaults() -> None:
    options = FilterOptions()

    assert options.allow_unknowns is False
    assert options.default_required is False
    assert options.as_dict() == {"allow_unknowns": False, "default_required": False}


@pytest.mark.unit
def test_options_must_be_bools() -> None:
    with pytest.raises(ConfigurationError, match="'allow_unknowns' option was not a bool"):
        FilterOptions(allow_unknowns=1)  # type: ignore[arg-type]


@pytest.mark.unit
def test_coerce_accepts_mapping_and_rejects_unknown_keys() -> None:
    assert coerce_options({"default_required": True}) == FilterOptions(default_required=True)
    assert coerce_options(None) == FilterOptions()
    with pytest.raises(ConfigurationError, match="unknown option 'strict'"):
        coerce_options({"strict": True})
    with pytest.raises(ConfigurationError, match="options was not a mapping"):
        coerce_options(["allow_unknowns"])  # type: ignore[arg-type]


@pytest.mark.unit
def test_environment_values_apply() -> None:
    options = load_options(
        environ={"SPECFILTER_ALLOW_UNKNOWNS": " Yes ", "SPECFILTER_DEFAULT_REQUIRED": "0"}
    )

    assert options == FilterOptions(allow_unknowns=True, default_required=False)


@pytest.mark.unit
def test_overrides_win_over_environment_per_key() -> None:
    environ = {"SPECFILTER_ALLOW_UNKNOWNS": "true", "SPECFILTER_DEFAULT_REQUIRED": "true"}

    options = load_options({"default_required": False}, environ=environ)

    assert options == FilterOptions(allow_unknowns=True, default_required=False)


@pytest.mark.unit
def test_options_object_overrides_everything() -> None:
    options = load_options(FilterOptions(), environ={"SPECFILTER_ALLOW_UNKNOWNS": "true"})

    assert options == FilterOptions()


@pytest.mark.unit
def test_bad_environment_token_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="SPECFILTER_DEFAULT_REQUIRED"):
        load_options(environ={"SPECFILTER_DEFAULT_REQUIRED": "maybe"})


@pytest.mark.unit
def test_process_environment_is_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPECFILTER_ALLOW_UNKNOWNS", "on")
    monkeypatch.delenv("SPECFILTER_DEFAULT_REQUIRED", raising=False)

    assert load_options().allow_unknowns is True
