from django.urls import path

from analytics.records import WORKOUT
from fittrack import entry_views

app_name = "workouts"

urlpatterns = [
    path("", entry_views.list_entries, {"kind": WORKOUT}, name="list"),
    path("create/", entry_views.create_entry, {"kind": WORKOUT}, name="create"),
    path("range/<str:start>/<str:end>/", entry_views.list_entries_in_range, {"kind": WORKOUT}, name="range"),
    path("<int:entry_id>/", entry_views.get_entry, {"kind": WORKOUT}, name="detail"),
    path("<int:entry_id>/update/", entry_views.update_entry, {"kind": WORKOUT}, name="update"),
    path("<int:entry_id>/delete/", entry_views.delete_entry, {"kind": WORKOUT}, name="delete"),
]
