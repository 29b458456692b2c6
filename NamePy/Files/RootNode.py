from typing import Optional
from typing_extensions import override

from NamePy.Files.Directory import Directory
from NamePy.Names.Name import Name
from NamePy.Names.StringArrayName import StringArrayName

class RootNode(Directory):
    """
    The root of a tree is its own parent and has an empty base name. Its full name is a single empty component with '/' as delimiter, so paths render as "/usr/bin".
    """
    root_node : Optional['RootNode'] = None

    @classmethod
    def get_root_node(cls) -> 'RootNode':
        if cls.root_node is None:
            cls.root_node = RootNode()
        return cls.root_node

    @override
    def __init__(self):
        Directory.__init__(self, "", self)

    @override
    def initialize(self, pn : Directory):
        self.parent_node = self

    @override
    def get_full_name(self) -> Name:
        return StringArrayName([""], '/')

__all__ = ['RootNode']
