"""Centralized defaults for promptlog. Overridable via configuration."""

from __future__ import annotations

# =============================================================================
# REPOSITORY LAYOUT
# =============================================================================

DEFAULT_REPO_DIR = ".prompt-repo"
DEFAULT_PROMPTS_FOLDER = "prompts"
DEFAULT_REMOTE_NAME = "origin"
GIT_METADATA_DIR = ".git"

# =============================================================================
# FILENAMES
# =============================================================================

FILENAME_PREFIX = "prompt"
FILENAME_SUFFIX = ".md"
SLUG_MAX_LENGTH = 40
COMMIT_MESSAGE_TEMPLATE = "Add prompt {filename}"

# =============================================================================
# TIMEOUTS (seconds)
# =============================================================================

DEFAULT_GIT_TIMEOUT_SECONDS = 60
NETWORK_GIT_TIMEOUT_SECONDS = 300

# =============================================================================
# FLAGS
# =============================================================================

TRUTHY_VALUES = frozenset({"true", "1"})
FALSY_VALUES = frozenset({"false", "0"})

# =============================================================================
# DEMO TOOLS
# =============================================================================

DEFAULT_WEATHER_CHOICES = "balmy,rainy,stormy"
DEFAULT_RANDOM_MIN = 0
DEFAULT_RANDOM_MAX = 100
