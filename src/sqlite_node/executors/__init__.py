# Re-export node classes for easy access
from .base import BaseNode
from .sqlite_exec import SqliteNode, QueryType
