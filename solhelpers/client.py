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
# module: client
#
# =============================================================================
# 
from   solana.rpc.api          import Client
from   solders.account_decoder import UiTokenAmount
from   solders.hash            import Hash
from   solders.instruction     import Instruction
from   solders.keypair         import Keypair
from   solders.pubkey          import Pubkey
from   solders.signature       import Signature
from   typing                  import List, Optional, Union
from  .helpers                 import MakePubkey, MakeKeypair, SolhelpersPubkey, SolhelpersKeypair, LAMPORTS_PER_SOL
from  .ix                      import CreateAccountIx, CreateAtaIx, GetAta
from  .rpc                     import SolhelpersRpc, SolhelpersRpcClient, SolhelpersTxParams
from  .tx                      import SolhelpersTx
import logging

logger = logging.getLogger("solhelpers")

# ================================================================================
# Pass as `lamports` to fund a new account with the rent-exempt minimum for its size.
#
RENT_EXEMPT: Optional[int] = None

# =============================================================================
#
class SolhelpersClient:
    """
    Session: one RPC handle plus the fee payer.

    Every operation builds its instructions, takes the latest blockhash, signs
    with the payer plus whoever else must authorize, sends and blocks until the
    transaction reaches `txParams.transactionCommitment`. Failures surface as
    `SolhelpersTransportError` or `SolhelpersProgramError`; nothing is retried.

    :param connection: RPC URL, `solana.rpc.api.Client`, or anything implementing `SolhelpersRpc`.
    :param payer:      Fee payer; see `MakeKeypair` for accepted formats.
    :param txParams:   Commitments and polling; also configures the RPC adapter when `connection` is a URL or `Client`.
    """
    def __init__(self,
                 connection: Union[str, Client, SolhelpersRpc],
                 payer:      SolhelpersKeypair,
                 txParams:   SolhelpersTxParams = SolhelpersTxParams()):
        self.RPC:       SolhelpersRpc      = SolhelpersRpcClient(connection=connection, txParams=txParams) \
                                             if isinstance(connection, (str, Client)) else connection
        self.PAYER:     Keypair            = MakeKeypair(payer)
        self.TX_PARAMS: SolhelpersTxParams = txParams
        if self.PAYER is None:
            raise ValueError("SolhelpersClient(): payer is required!")

    # ========================================
    #
    def PayerPubkey(self) -> Pubkey:
        return self.PAYER.pubkey()

    # ========================================
    #
    def LatestBlockhash(self) -> Hash:
        blockhash, _ = self.RPC.GetLatestBlockhash()
        return blockhash

    def RentMinimumBalance(self, dataLength: int) -> int:
        return self.RPC.GetMinimumBalanceForRentExemption(dataLength)

    # ========================================
    # Payer signs first and is deduplicated against `signers`.
    #
    def ProcessTransaction(self,
                           instructions: List[Instruction],
                           signers:      List[SolhelpersKeypair] = None) -> Signature:
        tx: SolhelpersTx = SolhelpersTx(rpc=self.RPC, payer=self.PAYER)
        return tx.FromInstructions(instructions=instructions, signers=signers).Sign().SendAndWait()

    # ========================================
    #
    def CreateAccount(self,
                      owner:      SolhelpersPubkey,
                      dataLength: int,
                      lamports:   Optional[int] = RENT_EXEMPT) -> Keypair:
        account: Keypair = Keypair()
        if lamports is RENT_EXEMPT:
            lamports = self.RentMinimumBalance(dataLength)

        ix: Instruction = CreateAccountIx(payer      = self.PayerPubkey(),
                                          newAccount = account.pubkey(),
                                          lamports   = lamports,
                                          space      = dataLength,
                                          owner      = MakePubkey(owner))
        self.ProcessTransaction(instructions=[ix], signers=[account])
        logger.info(f"SolhelpersClient::CreateAccount() {account.pubkey()} owner={MakePubkey(owner)}; space={dataLength}; lamports={lamports}")
        return account

    # ========================================
    #
    def GetAssociatedTokenAddress(self, wallet: SolhelpersPubkey, tokenMint: SolhelpersPubkey) -> Pubkey:
        return GetAta(tokenMint=tokenMint, owner=wallet)

    # ========================================
    # `funder` pays the ATA rent, the payer pays the fee. When they are the same
    # key it signs once.
    #
    def CreateAssociatedTokenAccount(self,
                                     funder:    SolhelpersKeypair,
                                     recipient: SolhelpersPubkey,
                                     tokenMint: SolhelpersPubkey) -> Pubkey:
        funderKeypair: Keypair     = MakeKeypair(funder)
        ix:            Instruction = CreateAtaIx(tokenMint=tokenMint, owner=recipient, payer=funderKeypair.pubkey())
        self.ProcessTransaction(instructions=[ix], signers=[funderKeypair])
        return self.GetAssociatedTokenAddress(wallet=recipient, tokenMint=tokenMint)

    def CreateAssociatedTokenAccountByPayer(self, recipient: SolhelpersPubkey, tokenMint: SolhelpersPubkey) -> Pubkey:
        return self.CreateAssociatedTokenAccount(funder=self.PAYER, recipient=recipient, tokenMint=tokenMint)

    # ========================================
    # Devnet/localnet faucet only. Expiry height is read at `transactionCommitment`.
    #
    def Airdrop(self, recipient: SolhelpersPubkey, lamports: int) -> Signature:
        _, lastValidBlockHeight = self.RPC.GetLatestBlockhash(commitment=self.TX_PARAMS.transactionCommitment)
        txid: Signature = self.RPC.RequestAirdrop(MakePubkey(recipient), lamports)
        self.RPC.ConfirmTransaction(signature=txid, lastValidBlockHeight=lastValidBlockHeight)
        logger.info(f"SolhelpersClient::Airdrop() {lamports} lamports to {MakePubkey(recipient)}")
        return txid

    # ========================================
    #
    def GetBalance(self, pubkey: SolhelpersPubkey) -> int:
        return self.RPC.GetBalance(MakePubkey(pubkey))

    def GetBalanceSol(self, pubkey: SolhelpersPubkey) -> float:
        return self.GetBalance(pubkey) / LAMPORTS_PER_SOL

    def GetTokenAccountBalance(self, pubkey: SolhelpersPubkey) -> UiTokenAmount:
        return self.RPC.GetTokenAccountBalance(MakePubkey(pubkey))

# =============================================================================
#
