from weekview.services.week_view_service import WeekViewService

__all__ = ["WeekViewService"]
