"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for the dataset size, the avatar endpoint
and the navigation query parameters.
"""

APP_TITLE = "Pet Adoption"

# Dummy dataset
PET_COUNT = 100
PET_NAME_TEMPLATE = "Cutie #{n}"

# Avatar endpoint: GET {host}/{hash(name)}?set=..&size=..&bgset=..
IMAGE_HOST = "https://robohash.org"
IMAGE_SET = "set4"
IMAGE_SIZE = "160x160"
IMAGE_BG_SET = "any"
IMAGE_TIMEOUT_SECONDS = 10.0
IMAGE_MAX_CONCURRENCY = 16
IMAGE_ALT_TEXT = "A cat"

# List layout (px)
CARD_HEIGHT = 280
CONTENT_PADDING = 16

# Query params mirrored from NavigationState
PAGE_PARAM = 'page'
INDEX_PARAM = 'index'
