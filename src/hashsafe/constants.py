APP_NAME = "HashSafe"
APP_SUBTITLE = "File Hash Calculator"
FOOTER_TEXT = "HashSafe © 2025"
CHUNK_SIZE = 1024  # Bytes per read
RESULT_PREFIX = "SHA-256 Hash: "
