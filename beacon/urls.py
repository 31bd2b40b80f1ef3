# beacon/urls.py
from django.urls import re_path
from .views import BeaconView

urlpatterns = [
    re_path(r'(?s)^(?P<path>.*)$', BeaconView.as_view(), name='beacon'),
]
