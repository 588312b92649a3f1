from __future__ import annotations

import logging as _logging
from contextlib import contextmanager as _contextmanager
from dataclasses import dataclass as _dataclass
from typing import Iterator as _Iterator

from . import _config
from ._pychronos import *
from ._pychronos import (  # for the docs
    __all__,
    __version__,
    _pin_test_now,
    _unpkl_interval,
    _unpkl_moment,
)

# Libraries don't configure logging; applications do.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())


@_dataclass
class _TimePatch:
    _pin: Moment
    _keep_ticking: bool

    def shift(self, interval: Interval | None = None, /, **kwargs) -> None:
        """Move the pinned time by an :class:`Interval`,
        or by the fields accepted by the :class:`Interval` constructor."""
        delta = Interval(**kwargs) if interval is None else interval
        if self._keep_ticking:
            self._pin = new = Moment.now(self._pin.timezone).add(delta)
        else:
            self._pin = new = self._pin.add(delta)
        _pin_test_now(new, self._keep_ticking)


@_contextmanager
def patch_current_time(
    moment: Moment,
    /,
    *,
    keep_ticking: bool = False,
) -> _Iterator[_TimePatch]:
    """Patch the current time to a fixed value (for testing purposes).
    Behaves as a context manager or decorator, with similar semantics to
    ``unittest.mock.patch``. The previous pinned time (if any) is restored
    on exit.

    Important
    ---------

    * This function only affects chronos's "current time" functions
      (:meth:`Moment.now`, :meth:`Moment.today`, ...). It does not
      affect the standard library's time functions or any other libraries.
      Use the ``time_machine`` package to patch other libraries as well.
    * The pinned time is process-wide, not per-thread.

    Example
    -------

    >>> from chronos import Moment, patch_current_time
    >>> m = Moment(1980, 3, 2, 2)
    >>> with patch_current_time(m) as p:
    ...     assert Moment.now() == m
    ...     p.shift(hours=4)
    ...     assert Moment.now() == m.add_hours(4)
    ...
    >>> assert Moment.now() != m
    """
    saved = _config.current()
    _pin_test_now(moment, keep_ticking)
    try:
        yield _TimePatch(moment, keep_ticking)
    finally:
        # an outer patch that keeps ticking carries on from its own clock
        _config.update(
            test_now=saved.test_now,
            test_now_ticking_since=saved.test_now_ticking_since,
        )


__all__ = [*__all__, "patch_current_time"]
