from __future__ import annotations

from urlpaths.errors import InvalidLocatorError, NullArgumentError
from urlpaths.locator import Locator


def _serialized(value: Locator | str, argument_name: str) -> str:
    if value is None:
        raise NullArgumentError(argument_name)
    return str(Locator.parse(value))


def change_extension(locator: Locator | str, new_extension: str) -> Locator:
    """Replace the ending after the last ``.`` of the whole locator text.

    ``file:/sds/a.bmp`` with ``sld`` gives ``file:/sds/a.sld``. The search is
    not limited to the path, so a locator whose only dot is in its host gets
    the host rewritten.
    """
    original = _serialized(locator, "locator")
    if new_extension is None:
        raise NullArgumentError("new_extension")
    last_dot = original.rfind(".")
    stem = original[:last_dot] if last_dot >= 0 else original
    try:
        return Locator(f"{stem}.{new_extension}")
    except InvalidLocatorError as exc:
        raise InvalidLocatorError(
            original, f"failed to create a new locator with extension {new_extension!r}: {exc.reason}"
        ) from exc


def extend(base: Locator | str, segment: str) -> Locator:
    """Append ``segment`` to ``base``, adding the separating ``/`` when missing.

    Nothing is normalised; ``..`` and repeated slashes are kept as given.
    """
    text = _serialized(base, "base")
    if segment is None:
        raise NullArgumentError("segment")
    if not text.endswith("/"):
        text += "/"
    return Locator(text + segment)


def parent(locator: Locator | str) -> Locator:
    """Truncate at the last ``/``.

    The parent of an archive entry such as ``jar:file:/some.zip!/bar.shp`` is
    the archive root ``jar:file:/some.zip!/``, never the bare ``!`` marker.
    """
    text = _serialized(locator, "locator")
    last_slash = text.rfind("/")
    if last_slash < 0:
        raise InvalidLocatorError(text, "no '/' to truncate at")
    truncated = text[:last_slash]
    if truncated.endswith("!"):
        truncated += "/"
    return Locator(truncated)


__all__ = ["change_extension", "extend", "parent"]
