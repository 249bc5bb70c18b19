# -----------------------------
# Config & Constants
# -----------------------------
import os

REDIS_HOST = os.environ.get("PARLEY_REDIS_HOST", "localhost")
REDIS_PORT = int(os.environ.get("PARLEY_REDIS_PORT", "6379"))
REDIS_DB = int(os.environ.get("PARLEY_REDIS_DB", "0"))

KEY_PREFIX = os.environ.get("PARLEY_KEY_PREFIX", "parley")
STOPWORDS_FILE = os.environ.get("PARLEY_STOPWORDS_FILE", "data/stop_words.txt")  # relative to the working directory
MEMORY_LIMIT = int(os.environ.get("PARLEY_MEMORY_LIMIT", "100"))

# Fixed replies
NOT_UNDERSTOOD = "I don't understand."
NOT_ENOUGH_INFO = "I don't have enough information."
NOT_ENOUGH_INFO_ABOUT = "I don't have enough information about {word}."
TALK_MORE = "Let's talk more about {word}. "
DEFINITION_NOT_FOUND = "Definition not found."
NO_RESPONSE = "I'm not sure how to respond."
