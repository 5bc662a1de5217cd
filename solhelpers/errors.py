#!/usr/bin/python
# =============================================================================
#
#  ######   #######  ##       ##     ## ######## ##       ########
# ##    ## ##     ## ##       ##     ## ##       ##       ##     ##
# ##       ##     ## ##       ##     ## ##       ##       ##     ##
#  ######  ##     ## ##       ######### ######   ##       ########
#       ## ##     ## ##       ##     ## ##       ##       ##
# ##    ## ##     ## ##       ##     ## ##       ##       ##
#  ######   #######  ######## ##     ## ######## ######## ##
#
# =============================================================================
#
# SuperArmor's Python Solana client helpers.
# (c) SuperArmor
#
# module: errors
#
# =============================================================================
# 
from typing import Optional

# =============================================================================
# 
class SolhelpersError(Exception):
    """
    Base exception for everything `solhelpers` raises on purpose.

    :param message: Human-readable description.
    :param cause:   Underlying exception (RPC, HTTP or confirmation error), also
                    chained as `__cause__` when raised with `from`.
    """
    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message: str                 = message
        self.cause:   Optional[Exception] = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"

# =============================================================================
# Network/RPC failure, including a transaction that was never confirmed in time.
# The transaction MAY still land, nothing here tells you it didn't.
#
class SolhelpersTransportError(SolhelpersError):
    pass

# =============================================================================
# The node (preflight) or the runtime rejected the transaction: wrong decimals,
# insufficient funds, missing signature, uninitialized account and so on.
#
class SolhelpersProgramError(SolhelpersError):
    def __init__(self, message: str, cause: Optional[Exception] = None, programError: object = None):
        super().__init__(message, cause)
        self.PROGRAM_ERROR: object = programError

# =============================================================================
# 
