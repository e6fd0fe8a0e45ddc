"""Programs services."""

from app.services.programs.service import ProgramService

__all__ = ["ProgramService"]
