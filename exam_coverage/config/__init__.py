"""
Application configuration and settings
"""

import os

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .constants import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    ALLOWED_MIME_TYPES,
    ALLOWED_EXTENSIONS,
    MAX_UPLOAD_BYTES,
)

# Model configuration
from .models import (
    ModelConfig,
    ThinkingLevel,
    THINKING_CAPABLE_MODELS,
    DEFAULT_ANALYSIS_MODEL,
    get_model_config,
    get_thinking_config,
)

# Syllabus catalog
from .syllabus import SyllabusCatalog, SyllabusTopic, SYLLABUS, SYLLABUS_NAME

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")
JSON_LOGS = os.getenv("JSON_LOGS", "false").lower() == "true"
