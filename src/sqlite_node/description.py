"""
description.py
--------------
Pydantic schemas for the declarative node description a host reads to list
a node and render its parameter form.
"""
from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class NodePropertyOption(BaseModel):
    name: str
    value: str
    description: Optional[str] = None


class NodeProperty(BaseModel):
    display_name: str
    name: str
    type: str  # string/options/json/boolean
    default: Any = None
    required: bool = False
    placeholder: Optional[str] = None
    description: Optional[str] = None
    no_data_expression: bool = False
    options: Optional[List[NodePropertyOption]] = None
    type_options: Optional[Dict[str, Any]] = None


class NodeDescription(BaseModel):
    display_name: str
    name: str
    icon: Optional[str] = None
    group: List[str] = []
    version: int = 1
    description: Optional[str] = None
    defaults: Dict[str, Any] = {}
    inputs: List[str] = ["main"]
    outputs: List[str] = ["main"]
    properties: List[NodeProperty] = []

    def get_property(self, name: str) -> Optional[NodeProperty]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None
