"""CLI smoke tests using typer's CliRunner."""

import logging
import zipfile

from typer.testing import CliRunner

from herocombiner.cli.app import app

runner = CliRunner()


class TestCombineCommand:
    """Tests for the combine command."""

    def test_combine_writes_archive(self, descriptor_files, tmp_path):
        output = tmp_path / "combinations.zip"
        result = runner.invoke(
            app, ["combine", *map(str, descriptor_files), "-k", "3", "-o", str(output)]
        )

        assert result.exit_code == 0, result.output
        assert "4 combinations" in result.output
        with zipfile.ZipFile(output) as zf:
            assert len(zf.namelist()) == 4

    def test_combine_uses_config_defaults(self, descriptor_files, tmp_path):
        runner.invoke(app, ["config", "set", "combine.output_dir", str(tmp_path / "out")])

        result = runner.invoke(app, ["combine", *map(str, descriptor_files)])

        assert result.exit_code == 0, result.output
        assert "3 combinations" in result.output
        assert (tmp_path / "out" / "combinations.zip").exists()

    def test_combine_dry_run(self, descriptor_files, tmp_path):
        result = runner.invoke(
            app, ["combine", *map(str, descriptor_files), "--dry-run", "-k", "2"]
        )

        assert result.exit_code == 0, result.output
        assert "XenaAndYuri.yml" in result.output
        assert "YuriAndZed.yml" in result.output
        assert list(tmp_path.rglob("*.zip")) == []

    def test_combine_single_file(self, descriptor_files):
        result = runner.invoke(app, ["combine", str(descriptor_files[0])])

        assert result.exit_code == 1
        assert "Invalid number of files" in result.output

    def test_combine_max_size_too_small(self, descriptor_files):
        result = runner.invoke(app, ["combine", *map(str, descriptor_files), "-k", "1"])

        assert result.exit_code == 1
        assert "Invalid max combinations" in result.output

    def test_combine_missing_file(self, descriptor_files, tmp_path):
        missing = tmp_path / "missing.yml"
        result = runner.invoke(app, ["combine", str(descriptor_files[0]), str(missing)])

        assert result.exit_code == 1


class TestInspectCommand:
    def test_inspect_shows_fields(self, descriptor_files):
        result = runner.invoke(app, ["inspect", str(descriptor_files[1])])

        assert result.exit_code == 0, result.output
        assert "name: Yuri" in result.output
        assert "coloured_name: '&7Yuri'" in result.output

    def test_inspect_missing_fields_are_null(self, tmp_path):
        path = tmp_path / "skills_only.yml"
        path.write_text("  skills:\n    - Heal\n", encoding="utf-8")

        result = runner.invoke(app, ["inspect", str(path)])

        assert result.exit_code == 0, result.output
        assert "name: null" in result.output

    def test_inspect_missing_file(self, tmp_path):
        result = runner.invoke(app, ["inspect", str(tmp_path / "nope.yml")])
        assert result.exit_code == 1


class TestConfigCommand:
    """Tests for the config command."""

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Combine" in result.output
        assert "Archive" in result.output
        assert "max_size = 2" in result.output

    def test_config_set(self):
        result = runner.invoke(app, ["config", "set", "combine.max_size", "3"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["config", "show"])
        assert "max_size = 3" in result.output

    def test_config_set_invalid_key(self):
        result = runner.invoke(app, ["config", "set", "invalid.key", "value"])
        assert result.exit_code == 1
        assert "Unknown key" in result.output

    def test_config_set_invalid_int_value(self):
        result = runner.invoke(app, ["config", "set", "combine.max_size", "abc"])
        assert result.exit_code == 1
        assert "Invalid integer" in result.output

    def test_config_set_missing_args(self):
        result = runner.invoke(app, ["config", "set"])
        assert result.exit_code == 1

    def test_config_reset(self):
        runner.invoke(app, ["config", "set", "combine.max_size", "4"])
        result = runner.invoke(app, ["config", "reset"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["config", "show"])
        assert "max_size = 2" in result.output

    def test_config_unknown_action(self):
        result = runner.invoke(app, ["config", "unknown_action"])
        assert result.exit_code == 1
        assert "Unknown action" in result.output


class TestLoggingSetup:
    """Logging level applies to every command, not just combine."""

    def test_verbose_flag_on_inspect(self, descriptor_files):
        result = runner.invoke(app, ["-v", "inspect", str(descriptor_files[0])])

        assert result.exit_code == 0, result.output
        assert logging.getLogger("herocombiner").level == logging.INFO

    def test_config_level_on_config_command(self):
        runner.invoke(app, ["config", "set", "logging.level", "debug"])
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0, result.output
        assert logging.getLogger("herocombiner").level == logging.DEBUG

    def test_broken_config_falls_back_to_warning(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("combine: [unclosed")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Invalid config file" in result.output
        assert logging.getLogger("herocombiner").level == logging.WARNING


class TestVersionFlag:
    """Test the --version flag."""

    def test_version_output(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "herocombiner" in result.output
