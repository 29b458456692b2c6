import logging
from typing import Any, Callable, List, Optional

from typeguard import CollectionCheckStrategy, TypeCheckError, check_type

from NamePy.Common.ContractErrors import IllegalArgumentError, InvalidStateError, MethodFailedError
from NamePy.Common.Printable import is_valid_delimiter

logger = logging.getLogger(__name__)

# when set, invariant failures also report the raw stored fields of the offending instance
should_print_state = True

# Preconditions

def assert_argument(condition : bool, message : str):
    if not condition:
        logger.debug("Precondition violated: %s", message)
        raise IllegalArgumentError(message)

def assert_argument_type(value : Any, expected_type : Any, message : str):
    """
    Checks the runtime type of an argument with typeguard. A mismatch is a precondition failure, so the TypeCheckError is converted.
    """
    try:
        check_type(value, expected_type)
    except TypeCheckError as e:
        logger.debug("Precondition violated: %s (%s)", message, e)
        raise IllegalArgumentError(f"{message}: {e}") from e

def assert_not_none(value : Any, message : str):
    assert_argument(value is not None, message)

def assert_valid_index(i : Any, no_components : int, allow_end : bool = False):
    """
    Index i must be an int in [0, no_components), or in [0, no_components] when allow_end is set (insert position).
    """
    # bool is a subclass of int but never a meaningful index
    assert_argument(isinstance(i, int) and not isinstance(i, bool), f"Index must be an integer, got {type(i).__name__}")
    assert_argument(i >= 0, f"Index must be non-negative, got {i}")
    # the bound comes from the receiver, so a corrupted count is a state failure rather than a bad argument
    assert_state(isinstance(no_components, int) and not isinstance(no_components, bool), f"Number of components must be an integer, got {no_components!r}")
    upper_bound = no_components if allow_end else no_components - 1
    assert_argument(i <= upper_bound, f"Index {i} out of bounds for {no_components} components")

def assert_valid_components(components : Any):
    """
    Components must be given as a sequence of strings; a single string is rejected even though it is a sequence of characters.
    """
    assert_not_none(components, "Components must be provided")
    assert_argument(not isinstance(components, str), "Components must be a sequence of strings, not a single string")
    try:
        check_type(list(components), List[str], collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS)
    except (TypeCheckError, TypeError) as e:
        logger.debug("Precondition violated: invalid components (%s)", e)
        raise IllegalArgumentError(f"Components must be a sequence of strings: {e}") from e

def assert_valid_delimiter(delimiter : Any):
    assert_argument(is_valid_delimiter(delimiter), f"Delimiter must be a single character other than the escape character, got {delimiter!r}")

# Invariants

def assert_state(condition : bool, message : str, describe : Optional[Callable[[], str]] = None):
    if not condition:
        if should_print_state and describe is not None:
            message = f"{message}\n\t{describe()}"
        logger.debug("Invariant violated: %s", message)
        raise InvalidStateError(message)

# Postconditions

def assert_method(condition : bool, message : str):
    if not condition:
        logger.debug("Postcondition violated: %s", message)
        raise MethodFailedError(message)

__all__ = [
    'assert_argument',
    'assert_argument_type',
    'assert_not_none',
    'assert_valid_index',
    'assert_valid_components',
    'assert_valid_delimiter',
    'assert_state',
    'assert_method',
]
