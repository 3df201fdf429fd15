"""
Magician Constants

Names shared by the magician plugin, its routes and its services.
"""

# Post type
MAGICIAN_POST_TYPE = "magician"
MAGICIAN_REWRITE_SLUG = "alliance-approved-magician"

# Options
FEATURED_MAGICIAN_OPTION = "featured_magician"

# Capabilities
CAP_MANAGE_MAGICIANS = "manage_magicians"

# Settings screen form
FEATURED_NONCE_ACTION = "aom-featured-magician-nonce"
FEATURED_NONCE_FIELD = "aom_nonce"
FEATURED_ID_FIELD = "magician"
SETTINGS_PAGE_PATH = "/admin/featured-magician"

# Shortcode
MAGICIAN_SHORTCODE = "magician"

# Templates
MAGICIAN_SINGLE_TEMPLATE = "single-magician.html"
