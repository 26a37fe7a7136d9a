from django.urls import path

from analytics.records import WEIGHT
from fittrack import entry_views

app_name = "weights"

urlpatterns = [
    path("", entry_views.list_entries, {"kind": WEIGHT}, name="list"),
    path("create/", entry_views.create_entry, {"kind": WEIGHT}, name="create"),
    path("range/<str:start>/<str:end>/", entry_views.list_entries_in_range, {"kind": WEIGHT}, name="range"),
    path("<int:entry_id>/", entry_views.get_entry, {"kind": WEIGHT}, name="detail"),
    path("<int:entry_id>/update/", entry_views.update_entry, {"kind": WEIGHT}, name="update"),
    path("<int:entry_id>/delete/", entry_views.delete_entry, {"kind": WEIGHT}, name="delete"),
]
