from typing import Set
from typing_extensions import override

from NamePy.Common.Contract import *
from NamePy.Files.Node import Node

class Directory(Node):
    @override
    def __init__(self, bn : str, pn : 'Directory'):
        self.child_nodes : Set[Node] = set()
        Node.__init__(self, bn, pn)

    def has_child_node(self, cn : Node) -> bool:
        assert_not_none(cn, "Child node must be provided")
        return cn in self.child_nodes

    def add_child_node(self, cn : Node):
        assert_not_none(cn, "Child node must be provided")
        self.child_nodes.add(cn)

    def remove_child_node(self, cn : Node):
        assert_not_none(cn, "Child node must be provided")
        assert_argument(cn in self.child_nodes, f"{cn.base_name!r} is not a child of {self.base_name!r}")
        self.child_nodes.remove(cn)

    @override
    def do_find_nodes(self, bn : str, matches : Set[Node]):
        super().do_find_nodes(bn, matches)
        for child in self.child_nodes:
            child.do_find_nodes(bn, matches)

__all__ = ['Directory']
