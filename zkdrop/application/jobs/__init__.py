"""Account maintenance jobs."""

from zkdrop.application.jobs.delete_user import DeleteUserJob

__all__ = ["DeleteUserJob"]
