import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# Environment variables for HealthScan-API
PORT = int(os.getenv("PORT", 8000))

# local store for the user health profile
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./health_scan.db")

# log file, rotated at 5 MB
LOG_FILE = os.getenv("LOG_FILE", "health_scan.log")

# timezone used for response timestamps
TIMEZONE = os.getenv("TIMEZONE", "Asia/Kolkata")

# logging levels, file and console
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
CONSOLE_LOG_LEVEL = os.getenv("CONSOLE_LOG_LEVEL", "ERROR").upper()
