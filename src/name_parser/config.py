import os
from pathlib import Path

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = Path(
    os.environ.get("NAME_PARSER_CONFIG", PROJECT_ROOT / "config" / "name_parser.yml")
)


class NPConfig:
    def __init__(self, data):
        self.paths = data.get("paths") or {}
        self.logging = data.get("logging") or {}
        self.parser = data.get("parser") or {}
        self.batch = data.get("batch") or {}
        self.debug = bool(data.get("debug", False))

    @property
    def credential_policy(self) -> str:
        return str(self.parser.get("credential_policy") or "retain").lower()

    @property
    def lexicon_file(self):
        value = self.parser.get("lexicon_file")
        if not value:
            return None
        path = Path(value)
        return path if path.is_absolute() else PROJECT_ROOT / path

    @property
    def name_column(self) -> str:
        return str(self.batch.get("name_column") or "full_name")

    @property
    def progress_every(self) -> int:
        return int(self.batch.get("progress_every") or 1000)


def load_config(path=None) -> 'NPConfig':
    config_path = Path(path) if path else CONFIG_PATH

    # An installed wheel ships without the repo-level config directory.
    if not config_path.exists():
        return NPConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return NPConfig(data)

_config_cache = None

def get_config() -> 'NPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
