# beacon/assets.py
from dataclasses import dataclass
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

GIF = "image/gif"
SVG = "image/svg+xml"


@dataclass(frozen=True)
class Asset:
    name: str
    content_type: str
    body: bytes


# (query flag, asset name, file, content type); first flag present wins.
FLAGGED_ASSETS = (
    ("pixel", "pixel", "pixel.gif", GIF),
    ("gif", "badge-gif", "badge.gif", GIF),
    ("flat", "flat-badge-svg", "badge-flat.svg", SVG),
    ("flat-gif", "flat-badge-gif", "badge-flat.gif", GIF),
)
DEFAULT_ASSET = ("badge-svg", "badge.svg", SVG)

ASSET_FLAGS = tuple(flag for flag, _, _, _ in FLAGGED_ASSETS)


class AssetStore:
    """The five image blobs, read once at startup and never written again."""

    def __init__(self, assets, default):
        self._assets = dict(assets)
        self._default = default

    @classmethod
    def load(cls, directory):
        directory = Path(directory)

        def read(name, filename, content_type):
            try:
                return Asset(name, content_type, (directory / filename).read_bytes())
            except OSError as exc:
                raise ImproperlyConfigured(f"cannot load asset {filename!r} from {directory}: {exc}") from exc

        assets = [(flag, read(name, fn, ct)) for flag, name, fn, ct in FLAGGED_ASSETS]
        return cls(assets, read(*DEFAULT_ASSET))

    def select(self, query):
        for flag in ASSET_FLAGS:
            if flag in query:
                return self._assets[flag]
        return self._default
