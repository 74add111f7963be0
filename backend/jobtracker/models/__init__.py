"""Database models"""
from jobtracker.models.application import Application, ApplicationStatus

__all__ = [
    "Application",
    "ApplicationStatus",
]
