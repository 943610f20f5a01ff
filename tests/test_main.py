"""End-to-end test of the demo CLI."""

import logging
import os

import pytest
from logsink import bootstrap
import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("LOG_CONFIG", "LOG_DIR", "LOG_APPNAME", "LOG_DEBUG", "LOG_STDOUT",
                "LOG_SHOW_APPNAME", "LOG_JOURNAL", "LOG_TARGETS"):
        monkeypatch.delenv(key, raising=False)
    level = logging.getLogger().level
    yield
    bootstrap.shutdown()
    logging.getLogger().setLevel(level)


def _log_lines(log_dir, appname):
    files = [f for f in os.listdir(log_dir) if f.startswith(appname) and f.endswith(".log")]
    assert len(files) == 1
    with open(os.path.join(log_dir, files[0])) as f:
        return f.read().splitlines()


class TestBuildParser:
    def test_blacklist_rule_with_equals_form(self):
        args = main.build_parser().parse_args(["--targets=-app::noisy,app"])
        assert args.targets == "-app::noisy,app"


class TestMain:
    def test_writes_all_levels_with_debug(self, tmp_path):
        main.main(["--log-dir", str(tmp_path), "--appname", "demo", "--no-stdout", "--debug"])
        lines = _log_lines(tmp_path, "demo")
        messages = [line.split(" : ", 2)[2] for line in lines if " : " in line]
        assert messages[-5:] == [
            "debug", "info", "warn", "error", "[worker] hello from a tagged thread",
        ]
        assert os.path.islink(tmp_path / "current")

    def test_info_level_by_default(self, tmp_path):
        main.main(["--log-dir", str(tmp_path), "--appname", "demo", "--no-stdout"])
        messages = [line.split(" : ", 2)[2] for line in _log_lines(tmp_path, "demo")]
        assert "debug" not in messages
        assert "error" in messages

    def test_yaml_config(self, tmp_path):
        cfg = tmp_path / "logging.yml"
        cfg.write_text(f"log_dir: {tmp_path / 'fromyaml'}\nappname: yamlapp\nuse_stdout: false\n")
        main.main(["--config", str(cfg)])
        assert "info" in "\n".join(_log_lines(tmp_path / "fromyaml", "yamlapp"))

    def test_console_output(self, tmp_path, capsys):
        main.main(["--log-dir", str(tmp_path), "--appname", "demo", "--show-appname"])
        out = capsys.readouterr().out
        assert "[demo] WARNING: warn" in out
        assert "[demo] ERROR: error" in out

    def test_targets_filter(self, tmp_path):
        main.main(["--log-dir", str(tmp_path), "--appname", "demo", "--no-stdout",
                   "--targets=-logsink::demo"])
        assert not [f for f in os.listdir(tmp_path) if f.endswith(".log")]

    def test_bad_log_dir_exits(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(SystemExit) as excinfo:
            main.main(["--log-dir", str(blocker / "logs"), "--no-stdout"])
        assert excinfo.value.code == 1
