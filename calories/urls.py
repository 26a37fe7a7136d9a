from django.urls import path

from analytics.records import CALORIE
from fittrack import entry_views

app_name = "calories"

urlpatterns = [
    path("", entry_views.list_entries, {"kind": CALORIE}, name="list"),
    path("create/", entry_views.create_entry, {"kind": CALORIE}, name="create"),
    path("range/<str:start>/<str:end>/", entry_views.list_entries_in_range, {"kind": CALORIE}, name="range"),
    path("<int:entry_id>/", entry_views.get_entry, {"kind": CALORIE}, name="detail"),
    path("<int:entry_id>/update/", entry_views.update_entry, {"kind": CALORIE}, name="update"),
    path("<int:entry_id>/delete/", entry_views.delete_entry, {"kind": CALORIE}, name="delete"),
]
