from .check import check
from .info import info
from .to_yaml import to_yaml

__all__ = ["check", "info", "to_yaml"]
