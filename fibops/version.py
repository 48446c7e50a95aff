# fibops/version.py
# Release metadata only; nothing in the compute path reads these.

MAJOR = 0
MINOR = 0
PATCH = 1
BUILD = "interview"

# e.g. 0.0.1
STRING = ".".join(str(p) for p in (MAJOR, MINOR, PATCH) if p is not None)

# e.g. 0.0.1-interview
FILE_STRING = "-".join(p for p in (STRING, BUILD) if p)
