from shipnote.core.jobs.notification import NotificationJob

__all__ = ['NotificationJob']
