import logging
from typing import TYPE_CHECKING, Set

from NamePy.Common.Contract import *
from NamePy.Common.ContractErrors import InvalidStateError, ServiceFailureError
from NamePy.Names.Name import Name

if TYPE_CHECKING:
    from NamePy.Files.Directory import Directory

logger = logging.getLogger(__name__)

class Node:
    def __init__(self, bn : str, pn : 'Directory'):
        assert_not_none(pn, "Parent directory must be provided")
        assert_argument_type(bn, str, "Base name must be a string")
        self.do_set_base_name(bn)
        self.parent_node = pn
        self.initialize(pn)

    def initialize(self, pn : 'Directory'):
        self.parent_node = pn
        self.parent_node.add_child_node(self)

    def move(self, to : 'Directory'):
        assert_not_none(to, "Target directory must be provided")
        logger.debug("Moving %r from %r to %r", self.base_name, self.parent_node.base_name, to.base_name)
        self.parent_node.remove_child_node(self)
        to.add_child_node(self)
        self.parent_node = to

    def get_full_name(self) -> Name:
        """
        The parent's full name with this node's base name appended. Every call builds a new name.
        """
        result = self.parent_node.get_full_name()
        result.append(self.get_base_name())
        return result

    def get_base_name(self) -> str:
        bn = self.do_get_base_name()
        assert_state(isinstance(bn, str), "Base name must be defined")
        if self.parent_node is not self:
            assert_state(len(bn) > 0, "Base name must not be empty")
        return bn

    def do_get_base_name(self) -> str:
        return self.base_name

    def rename(self, bn : str):
        assert_argument_type(bn, str, "Base name must be a string")
        self.do_set_base_name(bn)

    def do_set_base_name(self, bn : str):
        self.base_name = bn

    def get_parent_node(self) -> 'Directory':
        return self.parent_node

    def find_nodes(self, bn : str) -> Set['Node']:
        """
        Returns all nodes in the subtree rooted here whose base name is bn.
        A corrupted node found on the way makes the whole search fail with a ServiceFailureError.
        """
        assert_argument_type(bn, str, "Base name must be a string")
        try:
            matches : Set[Node] = set()
            self.do_find_nodes(bn, matches)
            return matches
        except InvalidStateError as e:
            logger.debug("Search for %r failed: %s", bn, e)
            raise ServiceFailureError("failed to search nodes", e) from e

    def do_find_nodes(self, bn : str, matches : Set['Node']):
        if self.get_base_name() == bn:
            matches.add(self)

__all__ = ['Node']
