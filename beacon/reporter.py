# beacon/reporter.py
from urllib.parse import urlencode

import requests
from django.conf import settings

from .errors import ReportError
from .recorder import Recorder

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# One pooled session per process, shared by every report.
_session = None


def get_session():
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def encode_payload(payload):
    """Flat form encoding, one pair per value, keys sorted."""
    return urlencode(sorted(payload.items()), doseq=True)


class HitReporter:
    """Posts one hit to the collector. One attempt, no retries."""

    def __init__(self, collector_url, timeout=3.0, session=None, recorder=None):
        self.collector_url = collector_url
        self.timeout = timeout
        self.session = session or get_session()
        self.recorder = recorder or Recorder()

    @classmethod
    def from_settings(cls, recorder=None, session=None):
        return cls(
            settings.BEACON_COLLECTOR_URL,
            timeout=settings.BEACON_COLLECTOR_TIMEOUT,
            session=session,
            recorder=recorder,
        )

    def report(self, payload, user_agent):
        headers = {
            "User-Agent": user_agent or "",
            "Content-Type": FORM_CONTENT_TYPE,
        }
        cid = (payload.get("cid") or [""])[0]
        try:
            resp = self.session.post(
                self.collector_url,
                data=encode_payload(payload),
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self.recorder.record_error("Collector POST error (cid: %s): %s", cid, exc)
            raise ReportError(f"collector POST failed: {exc}") from exc

        if resp.status_code >= 400:
            self.recorder.record_error("Collector rejected hit (cid: %s): HTTP %s", cid, resp.status_code)
            raise ReportError(f"collector returned HTTP {resp.status_code}", status_code=resp.status_code)

        self.recorder.record_debug("Collector status: %s, cid: %s", resp.status_code, cid)
        self.recorder.record_debug("Reported payload: %s", payload)
        return resp.status_code
