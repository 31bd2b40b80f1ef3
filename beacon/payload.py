# beacon/payload.py
"""
Measurement Protocol v1 payload for a single pageview.

Reference: https://developers.google.com/analytics/devguides/collection/protocol/v1/reference
"""

PROTOCOL_VERSION = "1"
HIT_TYPE = "pageview"
REQUIRED_FIELDS = ("v", "t", "tid", "cid", "dp", "uip")


def _query_lists(query):
    if hasattr(query, "lists"):  # QueryDict / MultiValueDict
        return query.lists()
    return (
        (key, list(value) if isinstance(value, (list, tuple)) else [value])
        for key, value in query.items()
    )


def compose(account, page, client_id, reporter_ip, query=None):
    payload = {
        "v": [PROTOCOL_VERSION],   # protocol version
        "t": [HIT_TYPE],           # hit type
        "tid": [account],          # tracking / property id
        "cid": [client_id],        # client id
        "dp": [page],              # document path
        "uip": [reporter_ip],      # IP override
    }
    # Query keys win outright, including the defaults above.
    for key, values in _query_lists(query or {}):
        payload[key] = [str(v) for v in values]
    return payload


def without_keys(query, keys):
    """Copy of a QueryDict/dict with the given keys dropped."""
    if hasattr(query, "lists"):
        return {k: list(v) for k, v in query.lists() if k not in keys}
    return {k: v for k, v in query.items() if k not in keys}
