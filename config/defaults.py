"""Default configuration constants for the Apartment Selector."""

import os

# Floor labels in display order: ground floor first, then 1..9
GROUND_FLOOR = "ц."
FLOORS = [GROUND_FLOOR, "1", "2", "3", "4", "5", "6", "7", "8", "9"]

# Apartments per floor, numbered 1..UNITS_PER_FLOOR
UNITS_PER_FLOOR = 14

# Occupancy dataset location (URL or local JSON path)
DATA_SOURCE = os.getenv("DATA_SOURCE", "apartments_status.json")

# Bounded wait for the dataset fetch; expiry counts as a fetch failure
FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", "5"))

# Tabs
TAB_GRID = "grid"
TAB_CARDS = "cards"
TAB_LIST = "list"
TAB_HEATMAP = "heatmap"
TABS = [TAB_GRID, TAB_CARDS, TAB_LIST, TAB_HEATMAP]
DEFAULT_TAB = TAB_GRID
TAB_LABELS = {
    TAB_GRID: "🏢 Grid",
    TAB_CARDS: "🗂️ Cards",
    TAB_LIST: "📋 List",
    TAB_HEATMAP: "🌡️ Heatmap",
}

# Session-scoped key holding the active tab
SELECTED_TAB_KEY = "selectedTab"

# List filter options
STATUS_ALL = "all"
STATUS_OCCUPIED = "occupied"
STATUS_FREE = "free"
STATUS_FILTERS = [STATUS_ALL, STATUS_OCCUPIED, STATUS_FREE]

# Outbound actions
ACTION_CREATE_CONTRACT = "create_contract"
ACTION_CREATE_RECEIPT = "create_receipt"
ACTION_LABELS = {
    ACTION_CREATE_CONTRACT: "✍️ Create contract",
    ACTION_CREATE_RECEIPT: "📝 Create receipt",
}

# Short action names used in the callback string and deep link
CALLBACK_ACTION_NAMES = {
    ACTION_CREATE_CONTRACT: "contract",
    ACTION_CREATE_RECEIPT: "receipt",
}
CALLBACK_PREFIX = "apt"

# Display defaults for a free apartment
FREE_UNIT_AREA = "40.71"
FREE_UNIT_ROOMS = 2
FREE_UNIT_BLOCK = "A"
NO_CLIENT_ID = "none"

# Bot that receives the deep link
BOT_USERNAME = os.getenv("BOT_USERNAME", "testdogovorbot")
BOT_LINK_BASE = "https://t.me/"

# Heatmap colours: free, occupied
HEATMAP_COLORSCALE = [[0.0, "#4CAF50"], [1.0, "#E8734A"]]

# Host trust gate; disable only for local development.
# The messenger puts its launch data in the URL fragment, which the server never
# sees. The launcher page must copy it into the query string as
# ?tgWebAppData=<initData> (either the bare initData or the whole fragment).
REQUIRE_HOST_AUTH = os.getenv("REQUIRE_HOST_AUTH", "1") not in ("0", "false", "no")
INIT_DATA_PARAM = "tgWebAppData"
