"""Tests for the configuration schema and loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from sheetfit.application.config import (
    ConfigError,
    OutputConfig,
    PackingConfiguration,
    PieceConfig,
    SearchConfig,
    SheetConfig,
    load_config,
    load_config_from_dict,
)


def _minimal(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "schema_version": "1.0",
        "sheet": {"length": 100, "width": 70},
        "piece": {"length": 30, "width": 20},
    }
    data.update(overrides)
    return data


class TestSchemaModels:
    """Tests for the Pydantic section models."""

    def test_defaults(self) -> None:
        config = PackingConfiguration.model_validate(_minimal())

        assert config.piece.margin_length == 0.0
        assert config.piece.margin_width == 0.0
        assert config.search == SearchConfig()
        assert config.search.timeout_seconds is None
        assert config.search.split_step == 1
        assert config.output == OutputConfig(format="text", precision=2)

    @pytest.mark.parametrize("value", [0, -1])
    def test_sheet_dimensions_positive(self, value: float) -> None:
        with pytest.raises(PydanticValidationError):
            SheetConfig(length=value, width=10)

    def test_negative_margin_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PieceConfig(length=3, width=2, margin_width=-0.5)

    def test_zero_split_step_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            SearchConfig(split_step=0)

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            OutputConfig(format="xml")  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(PydanticValidationError):
            PackingConfiguration.model_validate(_minimal(kerf=0.125))

    def test_newer_minor_version_accepted(self) -> None:
        config = PackingConfiguration.model_validate(_minimal(schema_version="1.3"))
        assert config.schema_version == "1.3"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(PydanticValidationError, match="Unsupported schema version"):
            PackingConfiguration.model_validate(_minimal(schema_version="2.0"))

    def test_malformed_version(self) -> None:
        with pytest.raises(PydanticValidationError):
            PackingConfiguration.model_validate(_minimal(schema_version="one"))


class TestLoadConfig:
    """Tests for loading configuration files."""

    def test_load_valid(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_full.json")

        assert config.sheet == SheetConfig(length=70, width=100)
        assert config.piece.margin_length == 1
        assert config.search.timeout_seconds == 30
        assert config.output.format == "json"
        assert config.output.precision == 1

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert "not found" in str(exc_info.value)

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 4

    def test_validation_errors_have_paths(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_dimensions.json")

        error = exc_info.value
        assert error.error_type == "validation"
        paths = {detail["path"] for detail in error.details}
        assert paths == {"sheet.length", "piece.margin_length"}
        assert "sheet.length" in str(error)

    def test_load_from_dict(self) -> None:
        config = load_config_from_dict(_minimal())
        assert config.piece == PieceConfig(length=30, width=20)

    def test_load_from_dict_invalid(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_minimal(piece={"length": 30}))

        assert exc_info.value.details[0]["path"] == "piece.width"

    def test_load_written_file(self, tmp_path: Path) -> None:
        path = tmp_path / "sheet.json"
        path.write_text(json.dumps(_minimal(search={"split_step": 0.5})))

        assert load_config(path).search.split_step == 0.5

    def test_overflowing_number_rejected(self, tmp_path: Path) -> None:
        """JSON 1e400 parses as infinity and must not pass as a positive length."""
        path = tmp_path / "sheet.json"
        path.write_text(
            '{"schema_version": "1.0", "sheet": {"length": 1e400, "width": 10},'
            ' "piece": {"length": 3, "width": 2}}'
        )

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "sheet.length"

    def test_directory_is_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.error_type in ("file_read_error", "permission_denied")
        assert exc_info.value.path == tmp_path
