"""
registry.py
-----------
Plugin/dynamic node registry. Every module in executors/ that defines
register(register_node) is imported and gets to register its node classes.
"""
import importlib
import logging
import os

logger = logging.getLogger(__name__)

NODE_REGISTRY = {}


def register_node(name, node_cls):
    NODE_REGISTRY[name] = node_cls


# Load all nodes in executors/ as plugins (if they have register())
def load_node_plugins():
    exec_dir = os.path.join(os.path.dirname(__file__), "executors")
    for fname in sorted(os.listdir(exec_dir)):
        if fname.endswith(".py") and not fname.startswith("__"):
            modname = f"sqlite_node.executors.{fname[:-3]}"
            mod = importlib.import_module(modname)
            if hasattr(mod, "register"):
                mod.register(register_node)
                logger.debug("Loaded node plugin %s", modname)


load_node_plugins()


def get_node(node_name):
    if node_name in NODE_REGISTRY:
        return NODE_REGISTRY[node_name]()
    raise ValueError(f"Unknown node: {node_name}")


def list_descriptions():
    return [node_cls.description for node_cls in NODE_REGISTRY.values()]
