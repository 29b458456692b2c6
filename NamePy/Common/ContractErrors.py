from typing import Optional

class ContractError(Exception):
    def __init__(self, message : str):
        self.message = message
        super().__init__(message)

# Precondition failures: the caller passed a bad argument, nothing was touched
class IllegalArgumentError(ContractError):
    def __init__(self, message : str):
        super().__init__(message)

# Invariant failures: the receiver was already corrupted on entry
class InvalidStateError(ContractError):
    def __init__(self, message : str):
        super().__init__(message)

# Postcondition failures: the operation itself did not do what it promised
class MethodFailedError(ContractError):
    def __init__(self, message : str):
        super().__init__(message)

class ServiceFailureError(ContractError):
    """
    Raised by a higher-level service when a lower-level contract failed underneath it. The original failure is kept in trigger.
    """
    def __init__(self, message : str, trigger : Optional[Exception] = None):
        self.trigger = trigger
        if trigger is not None:
            super().__init__(f"{message}: {trigger}")
        else:
            super().__init__(message)

__all__ = ['ContractError', 'IllegalArgumentError', 'InvalidStateError', 'MethodFailedError', 'ServiceFailureError']
