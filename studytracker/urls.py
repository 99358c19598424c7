from django.urls import include, path

from accounts.views import health

urlpatterns = [
    path("health", health, name="health"),
    path("api/", include("studylog.api.urls")),
    path("api/", include("accounts.urls")),
]
