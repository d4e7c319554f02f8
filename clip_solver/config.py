import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel

from clip_solver.exceptions import ConfigError

logger = logging.getLogger("config")

# Completion endpoint and request defaults
OPENAI_URL = "https://api.openai.com/v1/chat/completions"
MODEL = "gpt-4o"
SYSTEM_PROMPT = "You are a problem solver and only return the correct answer, without any other text."
POLL_INTERVAL = 2.0  # seconds between clipboard checks
ENV_FILE = ".env"


class Config(BaseModel):
    api_key: str
    completion_url: str = OPENAI_URL
    model: str = MODEL
    system_prompt: str = SYSTEM_PROMPT
    poll_interval: float = POLL_INTERVAL


def load_env_file(path=ENV_FILE):
    """Populate os.environ from a local .env file. Existing variables win."""
    if not os.path.isfile(path):
        logger.info(f"No {path} file found, using the process environment")
        return False
    if not load_dotenv(path):
        logger.info(f"{path} file set no variables")
    return True


def get_api_key():
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ConfigError("OPENAI_API_KEY environment variable is not set")
    return api_key


def load_config(env_file=ENV_FILE):
    """Load the .env file, then build the runtime config.

    Raises:
        ConfigError: If OPENAI_API_KEY is missing or empty.
    """
    load_env_file(env_file)
    return Config(api_key=get_api_key())
