from typing import List, Sequence
from typing_extensions import override

from NamePy.Common.Contract import *
from NamePy.Common.Printable import DEFAULT_DELIMITER
from NamePy.Names.EscapeCodec import join_components, parse_components, reconstruct_components
from NamePy.Names.Name import Name

class StringName(Name):
    """
    Stores the components as one canonical string: every component escaped for the active delimiter and joined by it.
    The string alone cannot tell "no components" from "one empty component", so the count is stored next to it.

    The component list is derived from the string on every read and never cached. Every mutation rebuilds the string, which makes mutations linear in the total length of the name.
    """
    @override
    def __init__(self, source : str, delimiter : str = DEFAULT_DELIMITER):
        assert_argument_type(source, str, "Source must be a string")
        Name.__init__(self, delimiter)

        self.name = ""
        self.no_components = 0
        self.rebuild(parse_components(source, self.delimiter))
        self.assert_invariant()

    @override
    @classmethod
    def from_components(cls, components : Sequence[str], delimiter : str = DEFAULT_DELIMITER) -> 'StringName':
        assert_valid_components(components)
        result = cls("", delimiter)
        result.rebuild(list(components))
        result.assert_invariant()
        return result

    @override
    def get_no_components(self) -> int:
        return self.no_components

    @override
    def get_component(self, i : int) -> str:
        assert_valid_index(i, self.no_components)
        return self.get_components()[i]

    @override
    def set_component(self, i : int, c : str):
        assert_valid_index(i, self.no_components)
        assert_argument_type(c, str, "Component must be a string")
        components = self.get_components()

        components[i] = c
        self.rebuild(components)

        self.assert_invariant()
        assert_method(self.get_component(i) == c, "Component must be updated")

    @override
    def insert(self, i : int, c : str):
        assert_valid_index(i, self.no_components, allow_end=True)
        assert_argument_type(c, str, "Component must be a string")
        components = self.get_components()
        old_no_components = self.no_components

        components.insert(i, c)
        self.rebuild(components)

        self.assert_invariant()
        assert_method(self.no_components == old_no_components + 1 and self.get_component(i) == c, "Component must be inserted")

    @override
    def append(self, c : str):
        assert_argument_type(c, str, "Component must be a string")
        components = self.get_components()
        old_no_components = self.no_components

        components.append(c)
        self.rebuild(components)

        self.assert_invariant()
        assert_method(self.no_components == old_no_components + 1 and self.get_component(self.no_components - 1) == c, "Component must be appended")

    @override
    def remove(self, i : int):
        assert_valid_index(i, self.no_components)
        components = self.get_components()
        old_no_components = self.no_components

        del components[i]
        self.rebuild(components)

        self.assert_invariant()
        assert_method(self.no_components == old_no_components - 1, "Component must be removed")

    def get_components(self) -> List[str]:
        """
        Checks the invariant and returns a fresh list of the raw components.
        """
        self.assert_invariant()
        return reconstruct_components(self.name, self.no_components, self.delimiter)

    def rebuild(self, components : List[str]):
        # nothing is assigned until the new string is known to parse back into as many components
        name = join_components(components, self.delimiter)
        if name == "":
            assert_method(len(components) <= 1, "Only a name with at most one empty component has an empty canonical string")
        else:
            assert_method(len(parse_components(name, self.delimiter)) == len(components), "Canonical string must parse back into the rebuilt components")
        self.name, self.no_components = name, len(components)

    @override
    def assert_invariant(self):
        super().assert_invariant()
        assert_state(isinstance(self.name, str), "Canonical string must be a string", self.describe_state)
        if self.no_components == 0:
            assert_state(self.name == "", "A name without components must have an empty canonical string", self.describe_state)
        elif self.name != "":
            # an empty canonical string with a positive count only holds empty components
            parsed = parse_components(self.name, self.delimiter)
            assert_state(len(parsed) == self.no_components, f"Canonical string holds {len(parsed)} components, but {self.no_components} are recorded", self.describe_state)

    @override
    def describe_state(self) -> str:
        return f"StringName(name={self.name!r}, no_components={self.no_components!r}, delimiter={self.delimiter!r})"

__all__ = ['StringName']
