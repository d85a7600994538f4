from .matcher_factory import DecimalNumberMatcherFactory

__all__ = [
    "DecimalNumberMatcherFactory",
]
