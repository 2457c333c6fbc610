from pathlib import Path

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# === Common directories ===
CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = PROJECT_ROOT  # or change to PROJECT_ROOT / "logs" in future

# === Bundled catalogs ===
CONSTANTS_PATH = CONFIG_DIR / "constants.json"
INTERACTION_RULES_PATH = CONFIG_DIR / "interaction_rules.json"
ITEM_PROFILES_PATH = CONFIG_DIR / "item_profiles.json"

# === Default log file path ===
LOG_PATH = LOG_DIR / "schedule_run.log"
