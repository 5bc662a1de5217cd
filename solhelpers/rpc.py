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
# module: rpc
#
# =============================================================================
# 
from   solana.rpc.api         import Client
from   solana.rpc.commitment  import Commitment
from   solana.rpc.core        import RPCException, UnconfirmedTxError, TransactionExpiredBlockheightExceededError
from   solana.rpc.types       import TxOpts
from   solana.exceptions      import SolanaRpcException
from   solders.hash           import Hash
from   solders.pubkey         import Pubkey
from   solders.signature      import Signature
from   solders.transaction    import Transaction
from   solders.account_decoder import UiTokenAmount
from   typing                 import Optional, Tuple, Union, Protocol
from   dataclasses            import dataclass
from   functools              import wraps
from  .errors                 import SolhelpersTransportError, SolhelpersProgramError
import httpx
import logging

logger = logging.getLogger("solhelpers")

# ================================================================================
#
@dataclass
class SolhelpersTxParams:
    blockhashCommitment:   Commitment = "finalized" # blockhash and preflight simulation
    transactionCommitment: Commitment = "confirmed" # what "done" means for send/airdrop/reads
    skipPreFlight:         bool       = False       # preflight is where program errors show up early
    sleepSeconds:          float      = 0.5         # between signature status polls

# ================================================================================
# Everything the helper needs from a node, nothing else. Test doubles implement
# this instead of the whole `solana.rpc.api.Client`.
#
class SolhelpersRpc(Protocol):
    def GetLatestBlockhash(self, commitment: Optional[Commitment] = None) -> Tuple[Hash, int]: ...

    def GetMinimumBalanceForRentExemption(self, dataLength: int) -> int: ...

    def SendAndConfirmTransaction(self, tx: Transaction, lastValidBlockHeight: int) -> Signature: ...

    def GetBalance(self, pubkey: Pubkey) -> int: ...

    def GetTokenAccountBalance(self, pubkey: Pubkey) -> UiTokenAmount: ...

    def RequestAirdrop(self, pubkey: Pubkey, lamports: int) -> Signature: ...

    def ConfirmTransaction(self, signature: Signature, lastValidBlockHeight: int) -> None: ...

# ================================================================================
# Converts solana-py/httpx exceptions into `SolhelpersTransportError`.
# `SolhelpersProgramError` raised inside the call passes through untouched.
#
TRANSPORT_EXCEPTIONS = (SolanaRpcException,
                        RPCException,
                        UnconfirmedTxError,
                        TransactionExpiredBlockheightExceededError,
                        httpx.HTTPError)

def TransportErrors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except TRANSPORT_EXCEPTIONS as e:
            logger.error(f"SolhelpersRpcClient::{func.__name__}() failed: {e}", exc_info=(type(e), e, e.__traceback__))
            raise SolhelpersTransportError(f"{func.__name__}() failed", cause=e) from e
    return wrapper

# ================================================================================
#
class SolhelpersRpcClient:
    def __init__(self, connection: Union[str, Client], txParams: SolhelpersTxParams = SolhelpersTxParams()):
        self.CONNECTION: Client             = Client(connection, commitment=txParams.transactionCommitment) \
                                              if isinstance(connection, str) else connection
        self.TX_PARAMS:  SolhelpersTxParams = txParams

    # ========================================
    # `commitment` defaults to `blockhashCommitment`.
    #
    @TransportErrors
    def GetLatestBlockhash(self, commitment: Optional[Commitment] = None) -> Tuple[Hash, int]:
        latestBlockHash = self.CONNECTION.get_latest_blockhash(commitment=commitment or self.TX_PARAMS.blockhashCommitment).value
        logger.debug(f"SolhelpersRpcClient::GetLatestBlockhash() blockhash={latestBlockHash.blockhash}; lastValidBlockHeight={latestBlockHash.last_valid_block_height}")
        return latestBlockHash.blockhash, latestBlockHash.last_valid_block_height

    # ========================================
    #
    @TransportErrors
    def GetMinimumBalanceForRentExemption(self, dataLength: int) -> int:
        lamports: int = self.CONNECTION.get_minimum_balance_for_rent_exemption(usize=dataLength, commitment=self.TX_PARAMS.transactionCommitment).value
        logger.debug(f"SolhelpersRpcClient::GetMinimumBalanceForRentExemption() dataLength={dataLength}; lamports={lamports}")
        return lamports

    # ========================================
    # Preflight rejections come back as `RPCException` from `send_raw_transaction`,
    # those are the program's verdict and not a transport problem.
    #
    def SendAndConfirmTransaction(self, tx: Transaction, lastValidBlockHeight: int) -> Signature:
        txid: Signature = self.__SendRaw(tx=tx)
        self.ConfirmTransaction(signature=txid, lastValidBlockHeight=lastValidBlockHeight)
        return txid

    @TransportErrors
    def __SendRaw(self, tx: Transaction) -> Signature:
        txOpts: TxOpts = TxOpts(skip_confirmation    = True,
                                skip_preflight       = self.TX_PARAMS.skipPreFlight,
                                preflight_commitment = self.TX_PARAMS.blockhashCommitment)
        try:
            return self.CONNECTION.send_raw_transaction(txn=bytes(tx), opts=txOpts).value
        except RPCException as e:
            logger.error(f"SolhelpersRpcClient::SendAndConfirmTransaction() rejected: {e}")
            raise SolhelpersProgramError("Transaction rejected", cause=e, programError=e.args[0] if e.args else None) from e

    # ========================================
    #
    @TransportErrors
    def ConfirmTransaction(self, signature: Signature, lastValidBlockHeight: int) -> None:
        resp = self.CONNECTION.confirm_transaction(tx_sig                  = signature,
                                                   commitment              = self.TX_PARAMS.transactionCommitment,
                                                   sleep_seconds           = self.TX_PARAMS.sleepSeconds,
                                                   last_valid_block_height = lastValidBlockHeight)
        status = resp.value[0] if resp.value else None
        if status is not None and status.err is not None:
            logger.error(f"FAIL: https://solscan.io/tx/{signature} {status.err}")
            raise SolhelpersProgramError(f"Transaction {signature} failed", programError=status.err)
        logger.info(f"SUCCESS: https://solscan.io/tx/{signature}")

    # ========================================
    #
    @TransportErrors
    def GetBalance(self, pubkey: Pubkey) -> int:
        return self.CONNECTION.get_balance(pubkey=pubkey, commitment=self.TX_PARAMS.transactionCommitment).value

    # ========================================
    #
    @TransportErrors
    def GetTokenAccountBalance(self, pubkey: Pubkey) -> UiTokenAmount:
        return self.CONNECTION.get_token_account_balance(pubkey=pubkey, commitment=self.TX_PARAMS.transactionCommitment).value

    # ========================================
    #
    @TransportErrors
    def RequestAirdrop(self, pubkey: Pubkey, lamports: int) -> Signature:
        return self.CONNECTION.request_airdrop(pubkey=pubkey, lamports=lamports, commitment=self.TX_PARAMS.transactionCommitment).value

# ================================================================================
#
