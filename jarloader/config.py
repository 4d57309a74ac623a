import os

RUNTIME_PROGRAM = os.environ.get("JARLOADER_RUNTIME") or "java"
RUNTIME_FLAG = "-jar"

# Code page used for byte strings handed to the wide-character Windows APIs.
NARROW_ENCODING = os.environ.get("JARLOADER_NARROW_ENCODING") or "cp1252"
WIDE_ENCODING = "utf-8"

DEFAULT_DIRECTORY_MODE = 0o777

LOG_LEVEL = (os.environ.get("JARLOADER_LOG_LEVEL") or "WARNING").upper()
LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"
