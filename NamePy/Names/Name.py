from abc import abstractmethod
from typing import List, Optional, Sequence

from NamePy.Common.Contract import *
from NamePy.Common.Printable import DEFAULT_DELIMITER, is_valid_delimiter
from NamePy.Names.EscapeCodec import escape_component, parse_components

def hash_string(s : str) -> int:
    """
    Polynomial rolling hash (base 31) truncated to a signed 32-bit integer after every step.
    """
    hash_code = 0
    for c in s:
        hash_code = (hash_code * 31 + ord(c)) & 0xFFFFFFFF
    if hash_code >= 0x80000000:
        hash_code -= 0x100000000
    return hash_code

class Name:
    """
    A name is a sequence of string components separated by a delimiter character.
    The delimiter and the escape character are the only special characters; the escape character is fixed, the delimiter is chosen per instance.

    "oss.cs.fau.de" is a name with four components and the delimiter '.'.
    "///" is a name with four empty components and the delimiter '/'.

    Everything in this class is written against the primitive accessors (get_no_components, get_component, set_component, insert, append, remove), which the representations implement.
    """
    def __init__(self, delimiter : str = DEFAULT_DELIMITER):
        assert_valid_delimiter(delimiter)
        self.delimiter = delimiter

    @classmethod
    @abstractmethod
    def from_components(cls, components : Sequence[str], delimiter : str = DEFAULT_DELIMITER) -> 'Name':
        raise NotImplementedError(f"Method from_components not implemented for class {cls.__name__}")

    # Primitives

    @abstractmethod
    def get_no_components(self) -> int:
        raise NotImplementedError(f"Method get_no_components not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def get_component(self, i : int) -> str:
        raise NotImplementedError(f"Method get_component not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def set_component(self, i : int, c : str):
        raise NotImplementedError(f"Method set_component not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def insert(self, i : int, c : str):
        raise NotImplementedError(f"Method insert not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def append(self, c : str):
        raise NotImplementedError(f"Method append not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def remove(self, i : int):
        raise NotImplementedError(f"Method remove not implemented for class {self.__class__.__name__}")

    # Shared algorithms

    def get_delimiter_character(self) -> str:
        self.assert_invariant()
        return self.delimiter

    def is_empty(self) -> bool:
        self.assert_invariant()
        return self.get_no_components() == 0

    def as_string(self, delimiter : Optional[str] = None) -> str:
        """
        Human-readable rendering: components are joined verbatim, nothing is escaped, so the result cannot always be parsed back.
        The delimiter defaults to the name's own one; passing another one does not change the name.
        """
        if delimiter is None:
            delimiter = self.delimiter
        else:
            assert_valid_delimiter(delimiter)
        self.assert_invariant()

        components = self.collect_components()
        result = delimiter.join(components)

        expected_length = sum(len(c) for c in components) + max(len(components) - 1, 0)
        assert_method(len(result) == expected_length, "as_string must join every component exactly once")
        return result

    def as_data_string(self) -> str:
        """
        Machine-readable rendering: every component is escaped for the default delimiter and joined with it, whatever the name's own delimiter is.
        Parsing the result with the default delimiter gives back an equal name.
        """
        self.assert_invariant()

        no_components = self.get_no_components()
        result = DEFAULT_DELIMITER.join(escape_component(self.get_component(i), DEFAULT_DELIMITER) for i in range(no_components))

        # a single empty component renders as "", which parses to no components at all
        round_trips = len(parse_components(result, DEFAULT_DELIMITER)) == no_components
        assert_method(round_trips or (result == "" and no_components <= 1), "as_data_string must be parseable into the same number of components")
        return result

    def is_equal(self, other : 'Name') -> bool:
        assert_argument(isinstance(other, Name), f"Can only compare with a Name, got {type(other).__name__}")
        self.assert_invariant()

        if self.get_no_components() != other.get_no_components():
            return False
        if self.get_delimiter_character() != other.get_delimiter_character():
            return False
        for i in range(self.get_no_components()):
            if self.get_component(i) != other.get_component(i):
                return False
        return True

    def get_hash_code(self) -> int:
        self.assert_invariant()
        return hash_string(self.as_data_string())

    def concat(self, other : 'Name'):
        """
        Appends every component of other, in order. Components are neither merged nor re-split and other is left as it is (unless other is this name).
        """
        assert_argument(isinstance(other, Name), f"Can only concatenate a Name, got {type(other).__name__}")
        self.assert_invariant()

        expected = self.get_no_components() + other.get_no_components()
        for c in other.collect_components():
            self.append(c)

        self.assert_invariant()
        assert_method(self.get_no_components() == expected, "concat must add every component of the other name")

    def clone(self) -> 'Name':
        self.assert_invariant()

        cloned = type(self).from_components(self.collect_components(), self.delimiter)

        assert_method(cloned is not self and cloned.is_equal(self), "Cloned name must equal the original")
        return cloned

    def collect_components(self) -> List[str]:
        """
        Returns a fresh list of the raw components; changing it does not change the name.
        """
        return [self.get_component(i) for i in range(self.get_no_components())]

    # Contract

    def assert_invariant(self):
        assert_state(is_valid_delimiter(self.delimiter), "Delimiter must always be a single character", self.describe_state)
        no_components = self.get_no_components()
        assert_state(isinstance(no_components, int) and no_components >= 0, "Number of components must be a non-negative integer", self.describe_state)

    def describe_state(self) -> str:
        """
        Describes the stored fields without running any checks, so it is safe to call on a corrupted name.
        """
        return f"{self.__class__.__name__}(delimiter={self.delimiter!r})"

    # Python protocol

    def __str__(self) -> str:
        return self.as_data_string()

    def __repr__(self) -> str:
        return self.describe_state()

    def __eq__(self, other : object) -> bool:
        if self is other: return True
        if not isinstance(other, Name): return False
        return self.is_equal(other)

    def __hash__(self) -> int:
        return self.get_hash_code()

__all__ = ['Name', 'hash_string']
