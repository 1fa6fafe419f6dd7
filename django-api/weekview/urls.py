from django.urls import path

from weekview.handlers import WeekHeaderView, WeekLayoutView

urlpatterns = [
    path("week-view/header", WeekHeaderView.as_view(), name="week-header"),
    path("week-view/layout", WeekLayoutView.as_view(), name="week-layout"),
]
