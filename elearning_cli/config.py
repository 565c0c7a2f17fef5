import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


LOG_DIR = os.getenv("ELEARNING_LOG_DIR", "logs")
SEED_DEMO_DATA = _flag("ELEARNING_SEED", True)
