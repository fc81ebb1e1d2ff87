"""Library warning capture at the entry-point boundary.

Some third-party libraries (the AWS SDK in particular) emit compatibility
warnings on every request. ``capture_library_warnings`` wraps a single
call: warnings raised from files inside one of the named packages are
written to the ``switchyard.diagnostics`` log and dropped, everything
else is re-emitted unchanged once the block exits.

Nothing is installed process-wide. The filter state is restored when the
block exits, so the capture covers exactly one delegated request.
"""

import logging
import warnings
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import PurePath

logger = logging.getLogger("switchyard.diagnostics")


def is_library_file(filename: str, modules: Iterable[str]) -> bool:
    """True if *filename* lives inside one of the packages in *modules*."""
    parts = PurePath(filename).parts
    return any(module in parts for module in modules)


def _dispatch(caught: list[warnings.WarningMessage], modules: tuple[str, ...]) -> None:
    for item in caught:
        if is_library_file(item.filename, modules):
            logger.warning(
                "%s from library: %s (%s:%d)",
                item.category.__name__,
                item.message,
                item.filename,
                item.lineno,
            )
        else:
            warnings.warn_explicit(
                item.message,
                item.category,
                item.filename,
                item.lineno,
                source=item.source,
            )


@contextmanager
def capture_library_warnings(modules: tuple[str, ...]) -> Iterator[None]:
    """Log warnings raised by *modules* inside the block instead of surfacing them.

    An empty *modules* tuple makes this a no-op.

    Usage::

        with capture_library_warnings(("botocore",)):
            await entry_point(scope, receive, send)
    """
    if not modules:
        yield
        return

    caught: list[warnings.WarningMessage] = []
    try:
        with warnings.catch_warnings(record=True) as recorded:
            warnings.simplefilter("always")
            try:
                yield
            finally:
                caught.extend(recorded)
    finally:
        _dispatch(caught, modules)
