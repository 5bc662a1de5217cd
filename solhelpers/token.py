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
# module: token
#
# =============================================================================
# 
from   solders.instruction import Instruction
from   solders.keypair     import Keypair
from   solders.signature   import Signature
from   spl.token.constants import MINT_LEN, ACCOUNT_LEN
from   typing              import List, Optional
from  .client              import SolhelpersClient
from  .helpers             import MakePubkey, MakeKeypair, SolhelpersPubkey, SolhelpersKeypair
from  .ix                  import CreateMintIxs, CreateTokenAccountIxs, MintToCheckedIx, TransferCheckedIx, CloseAccountIx
import logging

logger = logging.getLogger("solhelpers")

# =============================================================================
# SPL Token operations. Each one is a single transaction, account creation and
# initialization land together or not at all.
#
class SolhelpersTokenClient(SolhelpersClient):
    # ========================================
    #
    def CreateTokenMint(self,
                        mintAuthority:   SolhelpersPubkey,
                        decimals:        int,
                        freezeAuthority: Optional[SolhelpersPubkey] = None) -> Keypair:
        tokenMint: Keypair           = Keypair()
        ixList:    List[Instruction] = CreateMintIxs(payer           = self.PayerPubkey(),
                                                     tokenMint       = tokenMint.pubkey(),
                                                     lamports        = self.RentMinimumBalance(MINT_LEN),
                                                     mintAuthority   = mintAuthority,
                                                     decimals        = decimals,
                                                     freezeAuthority = freezeAuthority)
        self.ProcessTransaction(instructions=ixList, signers=[tokenMint])
        logger.info(f"SolhelpersTokenClient::CreateTokenMint() {tokenMint.pubkey()} decimals={decimals}; authority={MakePubkey(mintAuthority)}")
        return tokenMint

    # ========================================
    #
    def CreateTokenAccount(self, owner: SolhelpersPubkey, tokenMint: SolhelpersPubkey) -> Keypair:
        return self.CreateTokenAccountWithLamports(owner=owner, tokenMint=tokenMint, lamports=self.RentMinimumBalance(ACCOUNT_LEN))

    def CreateTokenAccountWithLamports(self, owner: SolhelpersPubkey, tokenMint: SolhelpersPubkey, lamports: int) -> Keypair:
        tokenAccount: Keypair           = Keypair()
        ixList:       List[Instruction] = CreateTokenAccountIxs(payer     = self.PayerPubkey(),
                                                                account   = tokenAccount.pubkey(),
                                                                lamports  = lamports,
                                                                tokenMint = tokenMint,
                                                                owner     = owner)
        self.ProcessTransaction(instructions=ixList, signers=[tokenAccount])
        logger.info(f"SolhelpersTokenClient::CreateTokenAccount() {tokenAccount.pubkey()} mint={MakePubkey(tokenMint)}; owner={MakePubkey(owner)}")
        return tokenAccount

    # ========================================
    # `decimals` must match the mint, the token program checks, we don't.
    #
    def MintTo(self,
               mintAuthority:  SolhelpersKeypair,
               tokenMint:      SolhelpersPubkey,
               account:        SolhelpersPubkey,
               amountLamports: int,
               decimals:       int) -> Signature:
        authority: Keypair     = MakeKeypair(mintAuthority)
        ix:        Instruction = MintToCheckedIx(tokenMint      = tokenMint,
                                                 destination    = account,
                                                 mintAuthority  = authority.pubkey(),
                                                 amountLamports = amountLamports,
                                                 decimals       = decimals)
        return self.ProcessTransaction(instructions=[ix], signers=[authority])

    # ========================================
    #
    def TransferTo(self,
                   owner:          SolhelpersKeypair,
                   tokenMint:      SolhelpersPubkey,
                   source:         SolhelpersPubkey,
                   destination:    SolhelpersPubkey,
                   amountLamports: int,
                   decimals:       int) -> Signature:
        authority: Keypair     = MakeKeypair(owner)
        ix:        Instruction = TransferCheckedIx(tokenMint      = tokenMint,
                                                   source         = source,
                                                   destination    = destination,
                                                   owner          = authority.pubkey(),
                                                   amountLamports = amountLamports,
                                                   decimals       = decimals)
        return self.ProcessTransaction(instructions=[ix], signers=[authority])

    # ========================================
    # All lamports go to `destination`, wrapped SOL included. A non-native
    # account that still holds tokens is refused by the token program.
    #
    def CloseTokenAccount(self,
                          owner:       SolhelpersKeypair,
                          account:     SolhelpersPubkey,
                          destination: SolhelpersPubkey) -> Signature:
        authority: Keypair     = MakeKeypair(owner)
        ix:        Instruction = CloseAccountIx(account=account, destination=destination, owner=authority.pubkey())
        return self.ProcessTransaction(instructions=[ix], signers=[authority])

# =============================================================================
#
