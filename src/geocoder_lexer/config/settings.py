import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).parent / "lexer.yaml"

# Loading ruleset, logging and batch settings from YAML file
def load_config(file_path):
    with open(file_path, "r") as file:
        return yaml.safe_load(file) or {}

SETTINGS = load_config(CONFIG_PATH)

LEXER_CONFIG = SETTINGS.get("lexer", {})

DEFAULT_RULESET = LEXER_CONFIG.get("ruleset", "dra")

logging_config = {
    "filename": "lexer.log",
    "level": "INFO",
    "console_level": "DEBUG",
    "max_bytes": 5 * 1024 * 1024,
    "backup_count": 3,
    "format": "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    **SETTINGS.get("logging", {}),
}

BATCH_CONFIG = {
    "address_column": "address",
    "cleaned_column": "cleaned_address",
    "postal_flag_column": "postal_junk",
    **SETTINGS.get("batch", {}),
}
