"""Progress bar and console output helpers for long filter passes."""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

from tqdm import tqdm

T = TypeVar("T")

_BAR_CHARS = " ▏▎▍▌▋▊▉█"
_BAR_FORMAT = "{l_bar}{bar}| {n_fmt}/{total_fmt} {unit} [{elapsed}<{remaining}]"


def iter_progress(
    iterable: Iterable[T],
    *,
    desc: Optional[str] = None,
    total: Optional[int] = None,
    enabled: bool = True,
    unit: str = "it",
) -> Iterable[T]:
    """Wrap ``iterable`` in a tqdm bar counting ``unit``, or return it untouched when disabled."""
    if not enabled:
        return iterable
    return tqdm(
        iterable,
        desc=desc,
        total=total,
        unit=unit,
        ascii=_BAR_CHARS,
        bar_format=_BAR_FORMAT,
        leave=False,
        dynamic_ncols=True,
    )


def progress_print(*args: object, enabled: bool = True, **kwargs: object) -> None:
    """Print without disrupting an active tqdm bar."""
    if enabled:
        tqdm.write(" ".join(str(arg) for arg in args))
        return
    print(*args, **kwargs)
