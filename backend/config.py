"""Configuration management for the sentence word counter."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CLI_LOG_LEVEL = os.getenv("CLI_LOG_LEVEL", "WARNING")  # keeps log lines out of the prompts
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")  # "json" or "text"

# Server Configuration
PORT = int(os.getenv("PORT", "8000"))

# CORS Configuration
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:3001"
).split(",")

# Tokenizer Configuration
SENTENCE_TERMINATORS = ".!?"
PUNCTUATION_MARKS = ".,!?\"'"
DEFAULT_TERMINATOR = "."

# Whitespace trimmed from input ends: every control character and the space.
# Regex splits use re.ASCII, so only [ \t\n\r\f\v] separate tokens.
TRIM_CHARS = "".join(chr(code) for code in range(0x21))
