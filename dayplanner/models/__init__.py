# This file ensures all models are loaded together to resolve circular references
from .user import User
from .task import Task, TaskPriority
from .daily_stat import DailyStat

__all__ = ["User", "Task", "TaskPriority", "DailyStat"]
