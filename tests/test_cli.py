"""Tests for CLI commands."""

from browsersupport.cli.app import app
from browsersupport.config.paths import ENV_VAR


class TestCheckCommand:
    """Tests for 'browsersupport check' command."""

    def test_supported(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["check", "chrome", "30", "--config", str(config_file)]
        )
        assert result.exit_code == 0
        assert "chrome 30: supported" in result.stdout

    def test_unsupported(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["check", "chrome", "20", "--config", str(config_file)]
        )
        assert result.exit_code == 1
        assert "unsupported" in result.stdout

    def test_unknown(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["check", "netscape", "4", "--config", str(config_file)]
        )
        assert result.exit_code == 2
        assert "unknown" in result.stdout

    def test_blacklist(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["check", "ie", "7", "--config", str(config_file)]
        )
        assert result.exit_code == 1

    def test_whitelist(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["check", "opera", "12", "--config", str(config_file)]
        )
        assert result.exit_code == 0

    def test_plugin_conditions(self, cli_runner, tmp_path):
        config_path = tmp_path / "config.toml"
        config_path.write_text('[support]\nbrowser_plugins = ["Flash 10.1+"]\n')
        result = cli_runner.invoke(
            app, ["check", "chrome", "40", "--config", str(config_path)]
        )
        assert result.exit_code == 0
        assert "requires Adobe Flash Player 10.1+" in result.stdout

    def test_features_override(self, cli_runner, tmp_path, features_file):
        config_path = tmp_path / "other.toml"
        config_path.write_text('[support]\nbrowser_features = "acme:grid"\n')
        result = cli_runner.invoke(
            app,
            [
                "check",
                "chrome",
                "60",
                "--config",
                str(config_path),
                "--features",
                str(features_file),
            ],
        )
        assert result.exit_code == 0

    def test_missing_features_file(self, cli_runner, tmp_path):
        config_path = tmp_path / "config.toml"
        config_path.write_text('features_path = "nope.json"\n')
        result = cli_runner.invoke(
            app, ["check", "chrome", "30", "--config", str(config_path)]
        )
        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_invalid_version(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["check", "chrome", "latest", "--config", str(config_file)]
        )
        assert result.exit_code == 1
        assert "Invalid version" in result.stdout

    def test_unknown_plugin_in_config(self, cli_runner, tmp_path):
        config_path = tmp_path / "config.toml"
        config_path.write_text('[support]\nbrowser_plugins = ["UnknownPluginXYZ 1+"]\n')
        result = cli_runner.invoke(
            app, ["check", "chrome", "30", "--config", str(config_path)]
        )
        assert result.exit_code == 1
        assert "unknown plugin" in result.stdout

    def test_missing_config(self, cli_runner, tmp_path):
        result = cli_runner.invoke(
            app, ["check", "chrome", "30", "--config", str(tmp_path / "missing.toml")]
        )
        assert result.exit_code == 1
        assert "not found" in result.stdout


class TestPluginsCommand:
    """Tests for 'browsersupport plugins' command."""

    def test_lists_builtins_without_config(self, cli_runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(ENV_VAR, str(tmp_path / "home"))
        result = cli_runner.invoke(app, ["plugins"])
        assert result.exit_code == 0
        assert "flash" in result.stdout
        assert "silverlight" in result.stdout

    def test_lists_configured_plugins(self, cli_runner, tmp_path):
        config_path = tmp_path / "config.toml"
        config_path.write_text(
            '[[plugins]]\nid = "widget"\nname = "Widget"\nwhitelist = ["chrome 20+"]\n'
        )
        result = cli_runner.invoke(app, ["plugins", "--config", str(config_path)])
        assert result.exit_code == 0
        assert "widget" in result.stdout


class TestConfigCommand:
    """Tests for 'browsersupport config' command."""

    def test_validate_success(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["config", "validate", "--path", str(config_file)]
        )
        assert result.exit_code == 0
        assert "valid" in result.stdout.lower()

    def test_validate_unknown_plugin(self, cli_runner, tmp_path):
        config_path = tmp_path / "config.toml"
        config_path.write_text('[support]\nbrowser_plugins = "garbage"\n')
        result = cli_runner.invoke(
            app, ["config", "validate", "--path", str(config_path)]
        )
        assert result.exit_code == 1
        assert "validation failed" in result.stdout.lower()

    def test_validate_invalid_toml(self, cli_runner, tmp_path):
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("not valid toml [[[")
        result = cli_runner.invoke(
            app, ["config", "validate", "--path", str(invalid_file)]
        )
        assert result.exit_code == 1

    def test_unknown_action(self, cli_runner):
        result = cli_runner.invoke(app, ["config", "unknown"])
        assert result.exit_code == 1
        assert "Unknown action" in result.stdout
