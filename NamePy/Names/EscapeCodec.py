from typing import List, Sequence
from typeguard import typechecked

from NamePy.Common.Printable import ESCAPE_CHARACTER

@typechecked
def escape_component(component : str, delimiter : str) -> str:
    """
    Masks a raw component so that it survives being joined with the delimiter.
    The escape character has to be doubled before the delimiter is masked, otherwise the freshly inserted escape characters would be escaped again.
    """
    escaped = component.replace(ESCAPE_CHARACTER, ESCAPE_CHARACTER + ESCAPE_CHARACTER)
    return escaped.replace(delimiter, ESCAPE_CHARACTER + delimiter)

@typechecked
def parse_components(value : str, delimiter : str) -> List[str]:
    """
    Splits a masked string into raw components. An escape character makes the next character literal, an unmasked delimiter ends the current component.
    A trailing lone escape character is kept literally. The empty string has no components.
    """
    if len(value) == 0:
        return []

    components : List[str] = []
    current = ""
    escaping = False
    for char in value:
        if escaping:
            current += char
            escaping = False
        elif char == ESCAPE_CHARACTER:
            escaping = True
        elif char == delimiter:
            components.append(current)
            current = ""
        else:
            current += char

    if escaping:
        current += ESCAPE_CHARACTER
    components.append(current)
    return components

@typechecked
def join_components(components : Sequence[str], delimiter : str) -> str:
    return delimiter.join(escape_component(component, delimiter) for component in components)

@typechecked
def reconstruct_components(value : str, no_components : int, delimiter : str) -> List[str]:
    """
    Recovers the component list of a canonical string whose component count is stored separately.
    - no components: nothing to parse,
    - an empty string with a positive count only holds empty components,
    - if parsing yields fewer components than recorded, the missing trailing ones are empty.
    """
    if no_components == 0:
        return []

    if len(value) == 0:
        return [""] * no_components

    parsed = parse_components(value, delimiter)
    while len(parsed) < no_components:
        parsed.append("")
    return parsed

__all__ = ['escape_component', 'parse_components', 'join_components', 'reconstruct_components']
