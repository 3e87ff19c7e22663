from enum import Enum

# Average month length used for every duration computed from portfolio dates.
AVERAGE_MONTH_DAYS: float = 30.44
SECONDS_PER_DAY: int = 60 * 60 * 24

# Width in cells of the proficiency bar rendered by the skills command.
PROFICIENCY_BAR_WIDTH: int = 20
PROFICIENCY_BAR_FILLED: str = "█"
PROFICIENCY_BAR_EMPTY: str = "░"

MAX_SUGGESTIONS: int = 3
MAX_SUGGESTION_DISTANCE: int = 2

SEPARATOR_WIDTH: int = 50

DEFAULT_THEME_NAME: str = "default"
DEFAULT_OWNER_NAME: str = "Hassan"
DEFAULT_PROMPT: str = "❯ "

# Placeholder figures shown by the stats command; they are not derived from data.
PLACEHOLDER_LINES_OF_CODE: int = 150_000
PLACEHOLDER_COFFEE_CUPS: int = 2_847


class SectionType(str, Enum):
    """Kinds of portfolio sections supplied by the data provider."""

    SKILL = "skill"
    EXPERIENCE = "experience"
    PROJECT = "project"
    CERTIFICATION = "certification"
    ACHIEVEMENT = "achievement"


class SkillCategory(str, Enum):
    """Skill categories, in the precedence order used by category flags."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    TOOLS = "tools"
    OTHER = "other"


class LineType(str, Enum):
    """Kinds of lines kept in a terminal session log."""

    COMMAND = "command"
    OUTPUT = "output"
    ERROR = "error"
