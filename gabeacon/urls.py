from django.urls import include, path

urlpatterns = [
    path('', include('beacon.urls')),
]
