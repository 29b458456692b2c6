from typing import List, Sequence
from typing_extensions import override

from NamePy.Common.Contract import *
from NamePy.Common.Printable import DEFAULT_DELIMITER
from NamePy.Names.EscapeCodec import parse_components
from NamePy.Names.Name import Name

class StringArrayName(Name):
    """
    Stores the raw components directly in a list, so index operations need no parsing.
    """
    @override
    def __init__(self, source : Sequence[str], delimiter : str = DEFAULT_DELIMITER):
        assert_valid_components(source)
        Name.__init__(self, delimiter)

        self.components : List[str] = list(source) # never alias the caller's list
        self.assert_invariant()

    @override
    @classmethod
    def from_components(cls, components : Sequence[str], delimiter : str = DEFAULT_DELIMITER) -> 'StringArrayName':
        return cls(components, delimiter)

    @classmethod
    def from_string(cls, source : str, delimiter : str = DEFAULT_DELIMITER) -> 'StringArrayName':
        assert_argument_type(source, str, "Source must be a string")
        assert_valid_delimiter(delimiter)
        return cls(parse_components(source, delimiter), delimiter)

    @override
    def get_no_components(self) -> int:
        assert_state(isinstance(self.components, list), "Components must be stored in a list", self.describe_state)
        return len(self.components)

    @override
    def get_component(self, i : int) -> str:
        assert_valid_index(i, self.get_no_components())
        self.assert_invariant()
        return self.components[i]

    @override
    def set_component(self, i : int, c : str):
        assert_valid_index(i, self.get_no_components())
        assert_argument_type(c, str, "Component must be a string")
        self.assert_invariant()

        self.components[i] = c

        self.assert_invariant()
        assert_method(self.components[i] == c, "Component must be updated")

    @override
    def insert(self, i : int, c : str):
        assert_valid_index(i, self.get_no_components(), allow_end=True)
        assert_argument_type(c, str, "Component must be a string")
        self.assert_invariant()
        old_no_components = len(self.components)

        self.components.insert(i, c)

        self.assert_invariant()
        assert_method(len(self.components) == old_no_components + 1 and self.components[i] == c, "Component must be inserted")

    @override
    def append(self, c : str):
        assert_argument_type(c, str, "Component must be a string")
        self.assert_invariant()
        old_no_components = len(self.components)

        self.components.append(c)

        self.assert_invariant()
        assert_method(len(self.components) == old_no_components + 1 and self.components[-1] == c, "Component must be appended")

    @override
    def remove(self, i : int):
        assert_valid_index(i, self.get_no_components())
        self.assert_invariant()
        old_no_components = len(self.components)

        del self.components[i]

        self.assert_invariant()
        assert_method(len(self.components) == old_no_components - 1, "Component must be removed")

    @override
    def assert_invariant(self):
        assert_state(isinstance(self.components, list), "Components must be stored in a list", self.describe_state)
        assert_state(all(isinstance(c, str) for c in self.components), "Every component must be a string", self.describe_state)
        super().assert_invariant()

    @override
    def describe_state(self) -> str:
        return f"StringArrayName(components={self.components!r}, delimiter={self.delimiter!r})"

__all__ = ['StringArrayName']
