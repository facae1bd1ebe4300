from django.urls import include, path

urlpatterns = [
    path("api/", include("stockroom.products.api.urls")),
]

handler404 = "stockroom.core.views.not_found"
handler500 = "stockroom.core.views.server_error"
