"""
base.py
-------
Defines the BaseNode interface for all workflow nodes.
All nodes should inherit from this class, declare a description and implement
the execute method.
"""
from typing import List

from ..description import NodeDescription
from ..host import ExecutionContext, NodeItem


class BaseNode:
    description: NodeDescription

    def execute(self, context: ExecutionContext) -> List[List[NodeItem]]:
        """
        context: host execution context (input items, parameters, workflow)
        Returns: output item lists, one per node output, built with
        context.prepare_output_data
        """
        raise NotImplementedError
