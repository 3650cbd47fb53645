import os
import contextlib


@contextlib.contextmanager
def use_770_permissions():
    """Files created inside this context get 770 permissions (umask 007).
    """
    original_umask = os.umask(0o007)
    try:
        yield
    finally:
        os.umask(original_umask)


@contextlib.contextmanager
def no_output():
    """Silences anything written to stdout / stderr, e.g. the builder's report."""
    with contextlib.redirect_stdout(None), contextlib.redirect_stderr(None):
        yield
