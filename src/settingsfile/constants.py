# Path separator used in dot-path keys
KEY_SEPARATOR = "."

# Default document file name (no extension)
DEFAULT_FILENAME = "settings"

# Environment variable overriding the user config base directory
HOME_ENV_VAR = "SETTINGSFILE_HOME"

# Suffix appended to a document path while it is being rewritten
TMP_SUFFIX = ".tmp"
