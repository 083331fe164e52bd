"""Named values used as macro parameters and inline styles."""

from enum import Enum, auto
from typing import Dict


class StatusColor(Enum):
    """Possible colors for the "status" macro block."""

    GREY = auto()
    RED = auto()
    YELLOW = auto()
    GREEN = auto()
    BLUE = auto()


# Values as expected by the "colour" macro parameter
STATUS_COLOR_NAMES: Dict[StatusColor, str] = {
    StatusColor.GREY: "Grey",
    StatusColor.RED: "Red",
    StatusColor.YELLOW: "Yellow",
    StatusColor.GREEN: "Green",
    StatusColor.BLUE: "Blue",
}


class Emoticon:
    """Supported emoticon symbols."""

    YELLOW_STAR = "yellow-star"


class Style:
    """Supported inline styles."""

    class Color:
        """Supported color styles."""

        DARK_GREEN = "color: rgb(0,128,0);"
        GRAY = "color: rgb(153,153,153);"
