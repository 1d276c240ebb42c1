from .generator import describe_fix

__all__ = ["describe_fix"]
