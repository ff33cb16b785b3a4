import os

from dotenv import load_dotenv

load_dotenv()

# Empty values fall back to the defaults.
ARRAYSTORE_IDENTIFIER_FORMAT = os.environ.get("ARRAYSTORE_IDENTIFIER_FORMAT") or "canonical"
ARRAYSTORE_LOG_LEVEL = os.environ.get("ARRAYSTORE_LOG_LEVEL") or "WARNING"
