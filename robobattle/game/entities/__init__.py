"""Robot entities and their templates."""

from .robot import Robot
from .robot_templates import RobotTemplate, load_robot_templates

__all__ = ["Robot", "RobotTemplate", "load_robot_templates"]
