from .match_decimal import MatchDecimalQuery, MatchDecimalQueryHandler, MatchDecimalResult

__all__ = [
    "MatchDecimalQuery",
    "MatchDecimalQueryHandler",
    "MatchDecimalResult",
]
