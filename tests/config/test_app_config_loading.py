import tempfile
import textwrap
import unittest
from pathlib import Path

from app_config import (
    AppConfigurationError,
    default_config_path,
    load_app_config,
    log_level_value,
    resolve_config_path,
)


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class AppConfigLoadingTests(unittest.TestCase):
    def test_missing_default_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            app_config = load_app_config(environ={"XDG_CONFIG_HOME": temp_dir})

        self.assertIsNone(app_config.source_file)
        self.assertEqual(0.25, app_config.runtime.poll_interval_seconds)
        self.assertEqual("WARNING", app_config.runtime.log_level)
        self.assertEqual("SIGUSR1", app_config.control.toggle_signal)
        self.assertEqual("SIGUSR2", app_config.control.reset_signal)
        self.assertTrue(app_config.notifications.enabled)
        self.assertEqual("pomod: time's up", app_config.notifications.summary)
        self.assertEqual("critical", app_config.notifications.urgency)
        self.assertEqual(5000, app_config.notifications.timeout_ms)
        self.assertTrue(app_config.sound.enabled)
        self.assertEqual("", app_config.sound.file)
        self.assertIsNone(app_config.sound.output_device)

    def test_missing_explicit_config_is_an_error(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            missing = Path(temp_dir) / "nope.toml"
            with self.assertRaises(AppConfigurationError):
                load_app_config(str(missing), environ={})

    def test_env_variable_selects_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "custom.toml"
            _write_text(config_path, "[runtime]\npoll_interval_seconds = 0.5\n")

            app_config = load_app_config(environ={"POMOD_CONFIG_FILE": str(config_path)})

            self.assertEqual(str(config_path), app_config.source_file)
            self.assertEqual(0.5, app_config.runtime.poll_interval_seconds)

    def test_load_app_config_reads_xdg_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            config_path = root / "pomod" / "config.toml"
            _write_text(
                config_path,
                textwrap.dedent(
                    """
                    [runtime]
                    log_level = "debug"

                    [control]
                    toggle_signal = "usr2"
                    reset_signal = "SIGHUP"

                    [notifications]
                    enabled = false
                    urgency = "Normal"
                    timeout_ms = 2500

                    [sound]
                    file = "sounds/bell.wav"
                    output_device = 3
                    volume = 0.25
                    """
                ).strip(),
            )

            app_config = load_app_config(environ={"XDG_CONFIG_HOME": temp_dir})

            self.assertEqual(str(config_path), app_config.source_file)
            self.assertEqual("DEBUG", app_config.runtime.log_level)
            self.assertEqual("SIGUSR2", app_config.control.toggle_signal)
            self.assertEqual("SIGHUP", app_config.control.reset_signal)
            self.assertFalse(app_config.notifications.enabled)
            self.assertEqual("normal", app_config.notifications.urgency)
            self.assertEqual(2500, app_config.notifications.timeout_ms)
            self.assertEqual(
                str((root / "pomod" / "sounds/bell.wav").resolve()),
                app_config.sound.file,
            )
            self.assertEqual(3, app_config.sound.output_device)
            self.assertEqual(0.25, app_config.sound.volume)

    def test_rejects_non_positive_poll_interval(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(config_path, "[runtime]\npoll_interval_seconds = 0\n")

            with self.assertRaises(AppConfigurationError):
                load_app_config(str(config_path), environ={})

    def test_rejects_identical_control_signals(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(
                config_path,
                '[control]\ntoggle_signal = "SIGUSR1"\nreset_signal = "usr1"\n',
            )

            with self.assertRaises(AppConfigurationError) as context:
                load_app_config(str(config_path), environ={})

            self.assertIn("control.toggle_signal", str(context.exception))

    def test_rejects_wrongly_typed_values(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(config_path, '[notifications]\nenabled = "maybe"\n')

            with self.assertRaises(AppConfigurationError) as context:
                load_app_config(str(config_path), environ={})

            self.assertIn("notifications.enabled", str(context.exception))

    def test_rejects_malformed_toml(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(config_path, "[runtime\n")

            with self.assertRaises(AppConfigurationError):
                load_app_config(str(config_path), environ={})

    def test_rejects_section_that_is_not_a_table(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(config_path, 'sound = "loud"\n')

            with self.assertRaises(AppConfigurationError):
                load_app_config(str(config_path), environ={})

    def test_resolve_config_path_prefers_explicit_argument(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            explicit = Path(temp_dir) / "explicit.toml"
            path, is_explicit = resolve_config_path(
                str(explicit),
                environ={"POMOD_CONFIG_FILE": "/elsewhere.toml"},
            )

        self.assertEqual(explicit, path)
        self.assertTrue(is_explicit)

    def test_default_config_path_falls_back_to_home_config(self) -> None:
        path = default_config_path({})
        self.assertEqual(Path.home() / ".config" / "pomod" / "config.toml", path)

    def test_log_level_value_maps_names(self) -> None:
        self.assertEqual(10, log_level_value("debug"))
        self.assertEqual(30, log_level_value("WARNING"))


if __name__ == "__main__":
    unittest.main()
