# Re-export main modules and objects for easier imports
from .config import settings
from .host import ExecutionContext, LocalExecutionContext, NodeItem, NodeParameterError, WorkflowInfo
from .executors import BaseNode, QueryType, SqliteNode
from .registry import get_node, register_node
