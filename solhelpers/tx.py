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
# module: tx
#
# =============================================================================
# 
from   solders.hash        import Hash
from   solders.instruction import Instruction
from   solders.keypair     import Keypair
from   solders.message     import Message
from   solders.pubkey      import Pubkey
from   solders.signature   import Signature
from   solders.transaction import Transaction
from   typing              import List, Sequence
from   datetime            import datetime
from  .helpers             import MakeKeypair, SolhelpersKeypair
from  .rpc                 import SolhelpersRpc
import base64
import logging

logger = logging.getLogger("solhelpers")

# ================================================================================
# A transaction carrying the same signer twice is rejected, the payer funding an
# ATA for itself is the usual way to get there. First occurrence wins, order kept.
#
def DedupeSigners(signers: Sequence[Keypair]) -> List[Keypair]:
    result: List[Keypair] = []
    seen                  = set()
    for signer in signers:
        pubkey: Pubkey = signer.pubkey()
        if pubkey in seen:
            continue
        seen.add(pubkey)
        result.append(signer)
    return result

# ================================================================================
#
class SolhelpersTx:
    def __init__(self, rpc: SolhelpersRpc, payer: SolhelpersKeypair):
        self.RPC:                    SolhelpersRpc     = rpc
        self.PAYER:                  Keypair           = MakeKeypair(payer)
        self.SIGNERS:                List[Keypair]     = [self.PAYER]
        self.INSTRUCTIONS:           List[Instruction] = []
        self.RAW_TX:                 Transaction       = None
        self.BLOCKHASH:              Hash              = None
        self.LAST_VALID_BLOCKHEIGHT: int               = None
        self.SENT_DT:                datetime          = None
        self.TXID:                   Signature         = None

    # ========================================
    # Payer always signs first, `signers` are the extra authorities.
    #
    def FromInstructions(self,
                         instructions: List[Instruction],
                         signers:      List[SolhelpersKeypair] = None) -> "SolhelpersTx":
        if not instructions:
            raise ValueError("SolhelpersTx::FromInstructions(): no instructions given!")

        self.INSTRUCTIONS = list(instructions)
        self.SIGNERS      = DedupeSigners([self.PAYER] + [MakeKeypair(signer) for signer in (signers or [])])
        self.BLOCKHASH, self.LAST_VALID_BLOCKHEIGHT = self.RPC.GetLatestBlockhash()
        return self

    # ========================================
    #
    def Sign(self) -> "SolhelpersTx":
        if self.BLOCKHASH is None:
            raise ValueError("SolhelpersTx::Sign(): call FromInstructions() first!")

        msg = Message.new_with_blockhash(self.INSTRUCTIONS, self.PAYER.pubkey(), self.BLOCKHASH)
        self.RAW_TX = Transaction(self.SIGNERS, msg, self.BLOCKHASH)
        return self

    # ========================================
    #
    def Encode(self) -> str:
        return base64.b64encode(bytes(self.RAW_TX)).decode("utf-8")

    # ========================================
    # Blocks until confirmed; no retries, the first error goes to the caller.
    #
    def SendAndWait(self) -> Signature:
        if self.RAW_TX is None:
            raise ValueError("SolhelpersTx::SendAndWait(): transaction is not signed!")

        self.SENT_DT = datetime.now()
        logger.debug(f"SolhelpersTx::SendAndWait() {len(self.INSTRUCTIONS)} instruction(s); {len(self.SIGNERS)} signer(s); {self.Encode()}")
        self.TXID = self.RPC.SendAndConfirmTransaction(tx=self.RAW_TX, lastValidBlockHeight=self.LAST_VALID_BLOCKHEIGHT)
        logger.debug(f"SolhelpersTx::SendAndWait() {self.TXID} took {(datetime.now() - self.SENT_DT).total_seconds():.2f}s")
        return self.TXID

# ================================================================================
#
