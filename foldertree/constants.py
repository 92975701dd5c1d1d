"""
Constants for the foldertree package.

Note: These constants serve as default fallback values.
Actual values are loaded from .foldertree/config.json by StorageManager.load_config().
"""

# =============================================================================
# Default Fallback Values
# These are used if config.json doesn't exist or doesn't specify a value.
# =============================================================================

# Scoped label carrying the folder path, e.g. "folder::groupA/groupB"
DEFAULT_FOLDER_LABEL_PREFIX = "folder::"

# Separator between path segments, in labels and in milestone titles
DEFAULT_PATH_SEPARATOR = "/"

# Separator between labels in an item's label string
DEFAULT_LABEL_SEPARATOR = ","

# Marker prepended to the joined path to form a folder id ("f-groupA/groupB")
DEFAULT_FOLDER_ID_PREFIX = "f-"

# Milestone ids are "m-{iid}"
MILESTONE_ID_PREFIX = "m-"

# Milestone ids before the "m-" format were numeric and offset by this value
LEGACY_MILESTONE_ID_OFFSET = 10000

# Parent value meaning "top level" in the wire format
ROOT_SENTINEL = 0

DEFAULT_CONFIG_DIR = ".foldertree"
CONFIG_FILE_NAME = "config.json"
SCHEMA_VERSION = "0.1.0"

# Tree display
DEFAULT_TREE_INDENT = 2

