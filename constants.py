# Pairing Constants
PLAYERS_PER_MATCH = 4
PLAYERS_PER_TEAM = 2

# Player Constants
MIN_SKILL = 1
MAX_SKILL = 5
DEFAULT_SKILL = 3
SKILL_LEVELS = list(range(MIN_SKILL, MAX_SKILL + 1))

# Tier thresholds on team skill (sum of both players' skill)
HEAVY_TEAM_SKILL_MIN = 9
MEDIUM_TEAM_SKILL_MIN = 7

# Schedule Constants
PLACEHOLDER_TIME = "-"
TEAM_NAME_SEPARATOR = " + "

# Setup Constants
DEFAULT_NUM_COURTS = 3
DEFAULT_HOURS_PLAYED = 2
DEFAULT_COURT_RATE = 200
DEFAULT_SHUTTLE_COUNT = 20
DEFAULT_SHUTTLE_PRICE = 15

# Roster import/editor columns
COL_NAME = "Player Name"
COL_HAND = "Hand"
COL_SKILL = "Skill"
ROSTER_COLUMNS = [COL_NAME, COL_HAND, COL_SKILL]
ROSTER_FILE_TYPES = ["csv", "xlsx"]

# Accepted spellings of the two hands in imported files (lower-cased).
# The Thai labels come from the club's existing spreadsheets.
RIGHT_HAND_ALIASES = {"right", "r", "ขวา"}
LEFT_HAND_ALIASES = {"left", "l", "ซ้าย"}
