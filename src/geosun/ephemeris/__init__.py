from .sun import DEFAULT_KERNEL, SunEphemeris

__all__ = ["DEFAULT_KERNEL", "SunEphemeris"]
