"""
Centralized constants for Orbitools.
All magic numbers and storage key names live here.
"""

# ===========================================
# CACHE
# ===========================================
CACHE_GROUP = 'orbitools'              # object cache namespace
TRANSIENT_GROUP = 'transient'          # transient store namespace
CACHE_EXPIRATION = 604800              # 1 week
CACHE_MAX_SIZE = 1000                  # entries kept in memory

SPACING_CACHE_KEY = 'spacing_config'
BREAKPOINTS_CACHE_KEY = 'breakpoints_config'

# Dev-mode theme file modification check
CONFIG_CHECK_KEY = 'orbitools_config_check'
CONFIG_CHECK_TTL = 300                 # 5 minutes

# ===========================================
# ADMIN FRAMEWORK
# ===========================================
SETTINGS_OPTION_SUFFIX = '_settings'   # option key is "{slug}_settings"
NOTICES_KEY_PREFIX = 'orbi_framework_notices_'
NOTICE_TTL = 300                       # 5 minutes
NONCE_ACTION_PREFIX = 'orbitools_adminkit_'
NONCE_LIFETIME_HOURS = 24
DEFAULT_CAPABILITY = 'manage_options'
DEFAULT_DISPLAY_MODE = 'cards'

# ===========================================
# CONFIG FILES
# ===========================================
DEFAULTS_FILENAME = 'defaults.json'
THEME_CONFIG_RELPATH = 'config/orbitools.json'

# ===========================================
# SPACING
# ===========================================
ZERO_SLUG = '0'
ZERO_NAME = 'None'
ALWAYS_VALID_SPACING_SLUGS = ('0', 'fill')
BASE_BREAKPOINT_SLUG = 'base'
DIMENSION_TYPES = ('gap', 'margin', 'padding')

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/orbitools.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5

# ===========================================
# TYPOGRAPHY PRESETS
# ===========================================
TYPOGRAPHY_CSS_CACHE_PREFIX = 'orbitools_typography_css_'
TYPOGRAPHY_CSS_TTL = 86400             # 24 hours
TYPOGRAPHY_DEFAULT_GROUP = 'theme'
TYPOGRAPHY_STYLE_ID = 'orbitools-typography-presets-css'

# ===========================================
# PLUGIN
# ===========================================
PLUGIN_SLUG = 'orbitools'
MODULE_SLUGS = ('dimensions_controls', 'flex_layout_controls', 'typography_presets')
