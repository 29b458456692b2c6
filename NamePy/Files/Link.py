from typing import Optional
from typing_extensions import override

from NamePy.Common.Contract import *
from NamePy.Files.Directory import Directory
from NamePy.Files.Node import Node

class Link(Node):
    """
    A link takes its base name from the node it points to; renaming a link renames the target.
    """
    @override
    def __init__(self, bn : str, pn : Directory, tn : Optional[Node] = None):
        self.target_node : Optional[Node] = tn
        Node.__init__(self, bn, pn)

    def get_target_node(self) -> Optional[Node]:
        return self.target_node

    def set_target_node(self, target : Node):
        assert_not_none(target, "Target node must be provided")
        self.target_node = target

    @override
    def get_base_name(self) -> str:
        return self.ensure_target_node().get_base_name()

    @override
    def rename(self, bn : str):
        self.ensure_target_node().rename(bn)

    def ensure_target_node(self) -> Node:
        assert_state(self.target_node is not None, "Link must reference a target node")
        return self.target_node # type: ignore

__all__ = ['Link']
