from weekview.handlers.views import WeekHeaderView, WeekLayoutView

__all__ = ["WeekHeaderView", "WeekLayoutView"]
