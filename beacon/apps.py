# beacon/apps.py
from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import get_template

from .assets import AssetStore
from .recorder import get_recorder

LANDING_TEMPLATE = "beacon/page.html"


class BeaconConfig(AppConfig):
    name = "beacon"
    assets = None
    landing_template = None

    def ready(self):
        # Serving without images or the landing page is not an option.
        self.assets = AssetStore.load(settings.BEACON_ASSET_DIR)
        try:
            self.landing_template = get_template(LANDING_TEMPLATE)
        except (TemplateDoesNotExist, TemplateSyntaxError) as exc:
            raise ImproperlyConfigured(f"cannot load {LANDING_TEMPLATE}: {exc}") from exc
        get_recorder().record_info("Beacon assets loaded from %s", settings.BEACON_ASSET_DIR)
