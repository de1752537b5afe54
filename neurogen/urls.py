from django.urls import include, path

urlpatterns = [
    path("markdown/", include("publishing.urls")),
]
