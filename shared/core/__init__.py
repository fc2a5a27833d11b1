import os

from dotenv import load_dotenv

# Determine environment (default to local if not set)
ENVIRONMENT = os.getenv("ENVIRONMENT", "local").lower()  # local | testing | production

# Load the matching .env file before settings are built
env_file = f".env.{ENVIRONMENT}"
if os.path.exists(env_file):
    load_dotenv(dotenv_path=env_file)

__all__ = ["ENVIRONMENT"]
