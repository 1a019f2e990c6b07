# tests/test_logging.py

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

from name_parser.config import NPConfig
from name_parser.logging import configure_logging, get_logger

SRC_PATH = Path(__file__).resolve().parent.parent / "src"


def _handler_types(logger: logging.Logger):
    return [type(h).__name__ for h in logger.handlers]


def test_names_are_nested_under_package() -> None:
    assert get_logger("cli").name == "name_parser.cli"
    assert get_logger("name_parser.loader.name_loader").name == "name_parser.loader.name_loader"
    assert get_logger().name == "name_parser"


def test_get_logger_attaches_nothing() -> None:
    log = get_logger("tests.plain")
    assert log.handlers == []


def test_configure_writes_master_and_module_files(tmp_path) -> None:
    cfg = NPConfig({"logging": {"level": "DEBUG", "file": "master.log"}})
    base = configure_logging(cfg, log_dir=tmp_path, force=True)

    get_logger("tests.files").info("hello from the module")
    for handler in base.handlers:
        handler.flush()

    assert "hello from the module" in (tmp_path / "master.log").read_text(encoding="utf-8")
    module_log = tmp_path / "name_parser_tests_files.log"
    assert "hello from the module" in module_log.read_text(encoding="utf-8")


def test_configure_twice_keeps_one_set_of_handlers(tmp_path) -> None:
    base = configure_logging(NPConfig({}), log_dir=tmp_path, force=True)
    before = _handler_types(base)
    configure_logging(NPConfig({}), log_dir=tmp_path / "other")
    assert _handler_types(base) == before
    assert not (tmp_path / "other").exists()


def test_unusable_log_dir_falls_back_to_console(tmp_path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")

    base = configure_logging(NPConfig({}), log_dir=blocker / "logs", force=True)

    assert _handler_types(base) == ["_StderrHandler"]


def test_import_and_parse_do_no_log_io(tmp_path) -> None:
    logs_dir = tmp_path / "logs"
    config = tmp_path / "np.yml"
    config.write_text(f"paths:\n  logs_dir: {logs_dir}\n", encoding="utf-8")

    env = dict(os.environ)
    env["NAME_PARSER_CONFIG"] = str(config)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_PATH), env.get("PYTHONPATH")]))
    code = (
        "import name_parser.cli\n"
        "from name_parser import parse_name\n"
        "assert parse_name('Dr. Jane A. Smith').last_name == 'Smith'\n"
    )

    result = subprocess.run([sys.executable, "-c", code], env=env, capture_output=True, text=True)

    assert result.returncode == 0, result.stderr
    assert not logs_dir.exists()
