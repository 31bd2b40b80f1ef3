# beacon/serializers.py
from django.core.validators import ProhibitNullCharactersValidator
from rest_framework import serializers

from .payload import REQUIRED_FIELDS


class RawStringField(serializers.CharField):
    """String passed through untouched: blanks, whitespace and NULs kept."""

    def __init__(self, **kwargs):
        kwargs.setdefault("allow_blank", True)
        kwargs.setdefault("trim_whitespace", False)
        super().__init__(**kwargs)
        self.validators = [
            v for v in self.validators if not isinstance(v, ProhibitNullCharactersValidator)
        ]


class HitReportSerializer(serializers.Serializer):
    """Shape check for a hit coming off the broker; values are not judged."""

    payload = serializers.DictField(child=serializers.ListField(child=RawStringField()))
    user_agent = RawStringField(required=False, default="")

    def validate_payload(self, value):
        missing = [f for f in REQUIRED_FIELDS if f not in value]
        if missing:
            raise serializers.ValidationError(f"missing fields: {', '.join(missing)}")
        return value
