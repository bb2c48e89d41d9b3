from django.urls import path

from candidates import views


urlpatterns = [
    path("imports/preview/", views.ImportPreviewView.as_view(), name="import-preview"),
    path("imports/commit/", views.ImportCommitView.as_view(), name="import-commit"),
    path("imports/template/", views.ImportTemplateView.as_view(), name="import-template"),
    path("catalogs/<str:catalog>/", views.CatalogOptionsView.as_view(), name="catalog-options"),
    path(
        "catalogs/<str:catalog>/normalize/",
        views.CatalogNormalizeView.as_view(),
        name="catalog-normalize",
    ),
    path("applications/", views.PublicApplicationView.as_view(), name="public-application"),
]
