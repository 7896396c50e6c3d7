"""
This package contains the interactive session that drives the application.
"""
from .session import InteractiveSession, SessionState
