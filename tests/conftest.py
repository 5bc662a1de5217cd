"""
Shared fixtures: an in-memory `SolhelpersRpc` double and a client on top of it.
"""

from typing import List, Optional, Set, Tuple

import pytest
from solders.hash import Hash
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction

from solhelpers import SolhelpersSwapClient

RENT_LAMPORTS = 2_039_280
LAST_VALID_BLOCK_HEIGHT = 1_000


class FakeRpc:
    """Records what the helper asks for; raises `sendError` on submit when set"""

    def __init__(self):
        self.blockhash: Hash = Hash.new_unique()
        self.blockhashCommitments: List[Optional[str]] = []
        self.rentRequests: List[int] = []
        self.sent: List[Transaction] = []
        self.confirmed: List[Tuple[Signature, int]] = []
        self.airdrops: List[Tuple[Pubkey, int]] = []
        self.sendError: Optional[Exception] = None
        self.sendAttempts: int = 0
        self.rentError: Optional[Exception] = None

    def GetLatestBlockhash(self, commitment: Optional[str] = None) -> Tuple[Hash, int]:
        self.blockhashCommitments.append(commitment)
        return self.blockhash, LAST_VALID_BLOCK_HEIGHT

    def GetMinimumBalanceForRentExemption(self, dataLength: int) -> int:
        if self.rentError is not None:
            raise self.rentError
        self.rentRequests.append(dataLength)
        return RENT_LAMPORTS

    def SendAndConfirmTransaction(self, tx: Transaction, lastValidBlockHeight: int) -> Signature:
        self.sendAttempts += 1
        if self.sendError is not None:
            raise self.sendError
        self.sent.append(tx)
        return tx.signatures[0]

    def GetBalance(self, pubkey: Pubkey) -> int:
        return 1_500_000_000

    def GetTokenAccountBalance(self, pubkey: Pubkey):
        return None

    def RequestAirdrop(self, pubkey: Pubkey, lamports: int) -> Signature:
        self.airdrops.append((pubkey, lamports))
        return Signature.default()

    def ConfirmTransaction(self, signature: Signature, lastValidBlockHeight: int) -> None:
        self.confirmed.append((signature, lastValidBlockHeight))


def Signers(tx: Transaction) -> Set[Pubkey]:
    """Pubkeys the message requires signatures from"""
    return set(tx.message.account_keys[: tx.message.header.num_required_signatures])


def ProgramIds(tx: Transaction) -> List[Pubkey]:
    keys = tx.message.account_keys
    return [keys[ix.program_id_index] for ix in tx.message.instructions]


def InstructionAccounts(tx: Transaction, index: int) -> List[Pubkey]:
    keys = tx.message.account_keys
    return [keys[i] for i in tx.message.instructions[index].accounts]


@pytest.fixture
def rpc() -> FakeRpc:
    return FakeRpc()


@pytest.fixture
def payer() -> Keypair:
    return Keypair()


@pytest.fixture
def client(rpc, payer) -> SolhelpersSwapClient:
    return SolhelpersSwapClient(connection=rpc, payer=payer)
