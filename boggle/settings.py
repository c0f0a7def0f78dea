import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 3
    MAX_RESULTS: int = 0
    SHUFFLE_DICTIONARY: bool = True
    REJECT_DUPLICATE_LETTERS: bool = False
    SEARCH_WORKERS: int = 1

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                if isinstance(current, bool):
                    setattr(self, fld, env_val.lower() in ("1", "true", "yes"))
                elif isinstance(current, int):
                    setattr(self, fld, int(env_val))
                elif isinstance(current, float):
                    setattr(self, fld, float(env_val))
                elif isinstance(current, Path):
                    setattr(self, fld, Path(env_val))
                else:
                    setattr(self, fld, env_val)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Fields that may be changed while the server is running
EDITABLE_FIELDS: dict[str, type] = {
    "MAX_RESULTS": int,
    "REJECT_DUPLICATE_LETTERS": bool,
    "SEARCH_WORKERS": int,
    "DEBUG": bool,
    "LOG_LEVEL": str,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def _coerce(value, typ: type):
    if typ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("1", "true", "yes", "0", "false", "no"):
            return value.lower() in ("1", "true", "yes")
        raise ValueError(f"expected a boolean, got {value!r}")
    if typ is int and isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    return typ(value)


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to cfg. Returns {field: error} for the ones that were rejected."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            coerced = _coerce(value, EDITABLE_FIELDS[name])
        except (TypeError, ValueError) as e:
            errors[name] = str(e)
            continue
        if EDITABLE_FIELDS[name] is int and coerced < 0:
            errors[name] = f"must not be negative, got {coerced}"
            continue
        if name == "LOG_LEVEL":
            coerced = coerced.upper()
            if coerced not in LOG_LEVELS:
                errors[name] = f"unknown log level {value!r}"
                continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
