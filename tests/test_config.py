"""Tests for configuration loading."""

from pathlib import Path

from sermon_export import config


class TestSettings:
    """Tests for Settings and the global accessors."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SERMON_EXPORT_FORMAT", raising=False)
        settings = config.Settings(_env_file=None)

        assert settings.default_format == ".docx"
        assert settings.font_name == "Arial"
        assert settings.placeholder_text.startswith("Содержание")

    def test_load_from_env_file(self, tmp_path: Path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "SERMON_EXPORT_FORMAT=.md\nSERMON_EXPORT_DATE_FORMAT=%Y/%m/%d\n",
            encoding="utf-8",
        )
        monkeypatch.setattr(config, "_settings", None)

        settings = config.load_settings(env_file)

        assert settings.default_format == ".md"
        assert settings.date_format == "%Y/%m/%d"
        assert config.get_settings() is settings
        monkeypatch.setattr(config, "_settings", None)

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv("SERMON_EXPORT_FONT", "Calibri")

        assert config.Settings(_env_file=None).font_name == "Calibri"
