"""
Global constants for NBA Players Browser.
Contains path configuration, API defaults, display settings and timing constants.
"""

import os

# **************************************************************** #
#                       Build Info                                     #
# **************************************************************** #
APP_NAME = "NBA Players"
APP_VERSION = "dev"

# **************************************************************** #
#                       Environment Detection                        #
# **************************************************************** #
DEV_MODE = os.getenv("DEV_MODE", "false").lower() == "true"

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))

# **************************************************************** #
#                       Path Configuration                           #
# **************************************************************** #
if DEV_MODE:
    DATA_DIR = os.path.join(SCRIPT_DIR, "..", "workdir")
else:
    DATA_DIR = os.path.join(os.path.expanduser("~"), ".nba_players_browser")

CONFIG_FILE = os.path.join(DATA_DIR, "config.json")
LOG_FILE = os.path.join(DATA_DIR, "error.log")

# **************************************************************** #
#                       Players API                                  #
# **************************************************************** #
API_BASE_URL = "https://www.balldontlie.io/api/v1"
DEFAULT_PAGE_SIZE = 50

# Sentinel entry of the position filter
ALL_PLAYERS = "All players"

# **************************************************************** #
#                       Display Settings                             #
# **************************************************************** #
FPS = 30
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

HEADER_HEIGHT = 60
FOOTER_HEIGHT = 60
LIST_ITEM_HEIGHT = 36
LIST_ITEM_SPACING = 4

# **************************************************************** #
#                       Navigation Timing                            #
# **************************************************************** #
NAVIGATION_INITIAL_DELAY = 300  # ms before repeating starts
NAVIGATION_START_RATE = 150  # ms between repeats when starting (slow)
NAVIGATION_MAX_RATE = 40  # ms between repeats at maximum speed (fast)
NAVIGATION_ACCELERATION = 0.85  # Acceleration factor per repeat

# **************************************************************** #
#                       Mouse Settings                               #
# **************************************************************** #
SCROLL_THRESHOLD = 5  # Pixels to move before a drag counts as scrolling
SCROLL_SENSITIVITY = 0.08  # List rows per pixel dragged
WHEEL_STEP = 3  # List rows moved per mouse wheel notch
TAP_TIME_THRESHOLD = 500  # ms; a longer press is not a click
