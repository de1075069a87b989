import os

from dotenv import load_dotenv

load_dotenv()


LOG_LEVEL = os.getenv("I18N_LOG_LEVEL", "INFO")
LOG_CONFIG = os.getenv("I18N_LOG_CONFIG", "")

# Defaults
DEFAULT_BASE = "."
DEFAULT_OUTPUT = "lang"
DEFAULT_EXTENSIONS = ["vue", "js"]
DEFAULT_FUNCTION_NAME = r"\$t"

JSON_INDENT = 2
