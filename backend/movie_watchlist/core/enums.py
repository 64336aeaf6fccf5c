from enum import Enum, unique


@unique
class MovieFlag(str, Enum):
    WATCHED = "watched"
    WATCHLIST = "watchlist"
    LIKED = "liked"
