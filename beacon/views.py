# beacon/views.py
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from urllib.parse import quote

from django.apps import apps
from django.conf import settings
from django.http import HttpResponse, HttpResponseRedirect
from django.utils.http import http_date
from django.views import View
from kombu.exceptions import OperationalError

from .assets import ASSET_FLAGS
from .errors import EntropyUnavailable, ReportError
from .identity import generate_client_id, is_valid_client_id
from .payload import compose, without_keys
from .recorder import get_recorder
from .reporter import HitReporter
from .routing import USE_REFERER_FLAG, PathRouter, Route
from .tasks import report_hit

CID_COOKIE = "cid"
NO_CACHE = "no-cache, no-store, must-revalidate, private"
CONTROL_FLAGS = frozenset(ASSET_FLAGS) | {USE_REFERER_FLAG}
# Sub-delims a browser leaves unescaped in a path, minus ";" which ends a cookie attribute.
_COOKIE_PATH_SAFE = "!$&'()*+,=:@~"

# Inline reports run here so the request waits at most the collector timeout.
_inline_pool = ThreadPoolExecutor(max_workers=4, thread_name_prefix="beacon-report")


def _client_ip(request):
    xff = request.META.get("HTTP_X_FORWARDED_FOR")
    if xff and settings.BEACON_TRUST_FORWARDED_FOR:
        return xff.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR") or ""


def cookie_path(account):
    """Percent-encoded `/{account}`: ASCII only, no `;` or control characters."""
    return "/" + quote(account, safe=_COOKIE_PATH_SAFE)


def dispatch_hit(payload, user_agent, recorder):
    """Hand a hit to the reporter without letting it touch the response."""
    if settings.BEACON_DISPATCH == "inline":
        reporter = HitReporter.from_settings(recorder=recorder)
        future = _inline_pool.submit(reporter.report, payload, user_agent)
        try:
            future.result(timeout=settings.BEACON_COLLECTOR_TIMEOUT)
        except FutureTimeout:
            recorder.record_error("Collector did not answer within %ss (cid: %s)",
                                  settings.BEACON_COLLECTOR_TIMEOUT, payload["cid"][0])
        except ReportError:
            pass  # recorded by the reporter
        return
    try:
        report_hit.delay(payload, user_agent)
    except OperationalError as exc:
        recorder.record_error("Could not queue hit for cid %s: %s", payload["cid"][0], exc)


class BeaconView(View):
    http_method_names = ["get", "head"]
    recorder = get_recorder("beacon.views")

    def setup(self, request, *args, **kwargs):
        super().setup(request, *args, **kwargs)
        self.config = apps.get_app_config("beacon")
        self.router = PathRouter(settings.BEACON_REDIRECT_URL, recorder=self.recorder)

    def get(self, request, *args, **kwargs):
        referer = request.headers.get("Referer", "")
        route = self.router.route(request.path_info, request.GET, referer)

        if route.kind == Route.REDIRECT:
            return HttpResponseRedirect(route.target)
        if route.kind == Route.LANDING:
            return self.landing(request, route)
        return self.hit(request, route)

    def landing(self, request, route):
        context = {"account": route.account, "referer": route.referer}
        try:
            body = self.config.landing_template.render(context, request)
        except Exception:
            self.recorder.record_error("Cannot render landing page for %r", route.account, exc_info=True)
            return HttpResponse("could not show account page", status=500, content_type="text/plain")
        return HttpResponse(body)

    def hit(self, request, route):
        cid = request.COOKIES.get(CID_COOKIE, "")
        new_cid = False
        if is_valid_client_id(cid):
            self.recorder.record_debug("Existing CID found: %s", cid)
        else:
            try:
                cid = generate_client_id()
                new_cid = True
                self.recorder.record_debug("Generated new client UUID: %s", cid)
            except EntropyUnavailable as exc:
                cid = ""
                self.recorder.record_error("Failed to generate client UUID: %s", exc)

        if cid:
            payload = compose(
                route.account,
                route.page,
                cid,
                _client_ip(request),
                without_keys(request.GET, CONTROL_FLAGS),
            )
            dispatch_hit(payload, request.headers.get("User-Agent", ""), self.recorder)

        asset = self.config.assets.select(request.GET)
        response = HttpResponse(asset.body, content_type=asset.content_type)
        response["Cache-Control"] = NO_CACHE
        response["Expires"] = http_date()
        if cid:
            response["CID"] = cid
        if new_cid:
            response.set_cookie(CID_COOKIE, cid, path=cookie_path(route.account))
        return response
