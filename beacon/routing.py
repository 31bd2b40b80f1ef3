# beacon/routing.py
from dataclasses import dataclass
from typing import Optional

from .recorder import Recorder

USE_REFERER_FLAG = "useReferer"
_SCHEMES = ("http://", "https://")


@dataclass(frozen=True)
class Route:
    REDIRECT = "redirect"
    LANDING = "landing"
    HIT = "hit"

    kind: str
    account: str = ""
    page: Optional[str] = None
    target: str = ""
    referer: str = ""


def split_path(path):
    """Split a trimmed path into at most [account, page]."""
    return path.split("/", 1)


def strip_scheme(referer):
    for scheme in _SCHEMES:
        if referer.startswith(scheme):
            return referer[len(scheme):]
    return referer


class PathRouter:
    """Turns a request path into a redirect, a landing page or a tracked hit."""

    def __init__(self, redirect_url, recorder=None):
        self.redirect_url = redirect_url
        self.recorder = recorder or Recorder()

    def route(self, path, query, referer=""):
        trimmed = (path or "").strip("/")
        if not trimmed:
            return Route(kind=Route.REDIRECT, target=self.redirect_url)

        segments = split_path(trimmed)
        referer = referer or ""

        # ?useReferer: the requested path becomes the account prefix and the
        # referring page becomes the tracked page.
        if USE_REFERER_FLAG in query and referer:
            stripped = strip_scheme(referer)
            if stripped:
                segments = split_path(trimmed + "/" + stripped)
                self.recorder.record_debug("Using referer %r for path %r", stripped, trimmed)

        if len(segments) == 1:
            return Route(kind=Route.LANDING, account=segments[0], referer=referer)
        return Route(kind=Route.HIT, account=segments[0], page=segments[1])
