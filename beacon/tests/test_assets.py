import pytest
from django.apps import apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from beacon.assets import GIF, SVG, AssetStore


@pytest.fixture(scope="module")
def store():
    return AssetStore.load(settings.BEACON_ASSET_DIR)


@pytest.mark.parametrize("query,name,content_type", [
    ({}, "badge-svg", SVG),
    ({"pixel": [""]}, "pixel", GIF),
    ({"gif": [""]}, "badge-gif", GIF),
    ({"flat": [""]}, "flat-badge-svg", SVG),
    ({"flat-gif": [""]}, "flat-badge-gif", GIF),
    ({"gif": [""], "pixel": [""]}, "pixel", GIF),
    ({"flat-gif": [""], "flat": [""]}, "flat-badge-svg", SVG),
    ({"utm_source": ["x"]}, "badge-svg", SVG),
])
def test_selection_precedence(store, query, name, content_type):
    asset = store.select(query)
    assert asset.name == name
    assert asset.content_type == content_type


def test_blobs_are_real_images(store):
    assert store.select({"pixel": [""]}).body.startswith(b"GIF89a")
    assert store.select({"gif": [""]}).body.startswith(b"GIF89a")
    assert store.select({"flat-gif": [""]}).body.startswith(b"GIF89a")
    assert b"<svg" in store.select({}).body
    assert b"<svg" in store.select({"flat": [""]}).body


def test_app_loads_assets_once():
    config = apps.get_app_config("beacon")
    assert isinstance(config.assets, AssetStore)
    assert config.landing_template is not None


def test_missing_asset_is_fatal(tmp_path):
    (tmp_path / "pixel.gif").write_bytes(b"GIF89a")
    with pytest.raises(ImproperlyConfigured):
        AssetStore.load(tmp_path)
