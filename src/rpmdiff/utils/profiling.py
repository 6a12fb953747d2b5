"""Profiling support for rpmdiff using cProfile.

When the RPMDIFF_PROFILE environment variable is set to a directory path,
profiling data is collected and saved under a per-run subdirectory named
after the start timestamp and PID.
"""
import cProfile
import functools
import itertools
import os
import time
from pathlib import Path
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec('P')
T = TypeVar('T')

PROFILE_ENV = 'RPMDIFF_PROFILE'

_profile_counter = itertools.count()


def get_profile_dir() -> Path | None:
    """Get the profile directory from environment variable.

    Returns:
        Path like "$RPMDIFF_PROFILE/1730332456789_54321" if RPMDIFF_PROFILE is set,
        None otherwise
    """
    profile_path = os.environ.get(PROFILE_ENV)
    if profile_path:
        return Path(profile_path) / f"{int(time.time() * 1000)}_{os.getpid()}"
    return None


def generate_profile_filename(prefix: str = "profile") -> str:
    """Generate a profile filename unique within this process, e.g. "main_54398_0.prof"."""
    return f"{prefix}_{os.getpid()}_{next(_profile_counter)}.prof"


def profile_function(func: Callable[P, T], prefix: str = "profile") -> Callable[P, T]:
    """Wrap a function so it runs under cProfile when RPMDIFF_PROFILE is set.

    Args:
        func: Function to profile
        prefix: Prefix for the profile filename

    Returns:
        Wrapped function
    """
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        profile_dir = get_profile_dir()

        if profile_dir is None:
            return func(*args, **kwargs)

        profile_dir.mkdir(parents=True, exist_ok=True)
        profile_file = profile_dir / generate_profile_filename(prefix)

        profiler = cProfile.Profile()
        try:
            profiler.enable()
            return func(*args, **kwargs)
        finally:
            profiler.disable()
            profiler.dump_stats(str(profile_file))

    return wrapper


def profile_main(func: Callable[P, T]) -> Callable[P, T]:
    """Decorator for the main entry point; profiles with the "main" prefix."""
    return profile_function(func, prefix="main")
