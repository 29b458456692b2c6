from enum import Enum
from typing_extensions import override

from NamePy.Common.Contract import *
from NamePy.Files.Directory import Directory
from NamePy.Files.Node import Node

class FileState(Enum):
    OPEN = 1
    CLOSED = 2
    DELETED = 3

class File(Node):
    @override
    def __init__(self, bn : str, pn : Directory):
        self.state = FileState.CLOSED
        Node.__init__(self, bn, pn)

    def open(self):
        assert_state(self.state != FileState.DELETED, "Cannot open deleted file")
        assert_state(self.state == FileState.CLOSED, "File must be closed to open")
        self.state = FileState.OPEN
        assert_method(self.state == FileState.OPEN, "File failed to open")

    def read(self, no_bytes : int) -> bytearray:
        assert_argument(isinstance(no_bytes, int) and not isinstance(no_bytes, bool), "Number of bytes must be an integer")
        assert_argument(no_bytes >= 0, "Number of bytes must be non-negative")
        assert_state(self.state == FileState.OPEN, "File must be open to read")
        return bytearray(no_bytes)

    def close(self):
        assert_state(self.state == FileState.OPEN, "File must be open to close")
        self.state = FileState.CLOSED
        assert_method(self.state == FileState.CLOSED, "File failed to close")

    def delete(self):
        assert_state(self.state == FileState.CLOSED, "File must be closed to delete")
        self.parent_node.remove_child_node(self)
        self.state = FileState.DELETED
        assert_method(self.state == FileState.DELETED, "File failed to delete")

    def get_file_state(self) -> FileState:
        return self.state

__all__ = ['File', 'FileState']
