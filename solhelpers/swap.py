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
# module: swap
#
# =============================================================================
# 
from   solders.instruction import Instruction
from   solders.keypair     import Keypair
from   solders.pubkey      import Pubkey
from   solders.signature   import Signature
from   spl.token.constants import ACCOUNT_LEN
from   typing              import Callable, List, Optional, Tuple
from   dataclasses         import dataclass
from  .helpers             import MakePubkey, MakeKeypair, SolhelpersPubkey, SolhelpersKeypair
from  .ix                  import CreateTokenAccountIxs
from  .token               import SolhelpersTokenClient
from  .programs.token_swap import SolhelpersFees, SolhelpersSwapCurve, InitializeSwapIx, SwapIx, FindSwapAuthority, \
                                  TOKEN_SWAP_PROGRAM_ID, SWAP_STATE_LEN
import logging

logger = logging.getLogger("solhelpers")

# Gets the swap authority, returns a funded token account owned by it.
TokenAccountMaker = Callable[[Pubkey], Keypair]

# =============================================================================
#
@dataclass
class SolhelpersSwapKeys:
    swap:                          Keypair
    authorityAddress:              Pubkey
    authorityNonce:                int
    tokenA:                        Keypair
    tokenB:                        Keypair
    poolTokenMint:                 Keypair
    feeAccount:                    Keypair
    poolTokenInitialSupplyAccount: Keypair

# =============================================================================
#
class SolhelpersSwapClient(SolhelpersTokenClient):
    # ========================================
    # One transaction: fee account and initial supply account (both pool-token
    # accounts) are created and initialized before the pool initialize
    # instruction that references them.
    #
    def CreateSwap(self,
                   swapAccount:        SolhelpersKeypair,
                   swapAuthority:      SolhelpersPubkey,
                   swapAuthorityNonce: int,
                   poolTokenMint:      SolhelpersPubkey,
                   tokenA:             SolhelpersPubkey,
                   tokenB:             SolhelpersPubkey,
                   owner:              SolhelpersPubkey,
                   feeOwner:           SolhelpersPubkey,
                   fees:               SolhelpersFees      = SolhelpersFees(),
                   swapCurve:          SolhelpersSwapCurve = SolhelpersSwapCurve(),
                   swapProgramId:      SolhelpersPubkey    = TOKEN_SWAP_PROGRAM_ID) -> Tuple[Keypair, Keypair]:
        swap:                          Keypair = MakeKeypair(swapAccount)
        feeAccount:                    Keypair = Keypair()
        poolTokenInitialSupplyAccount: Keypair = Keypair()
        lamports:                      int     = self.RentMinimumBalance(ACCOUNT_LEN)

        ixList: List[Instruction] = []
        ixList += CreateTokenAccountIxs(payer     = self.PayerPubkey(),
                                        account   = feeAccount.pubkey(),
                                        lamports  = lamports,
                                        tokenMint = poolTokenMint,
                                        owner     = feeOwner)
        ixList += CreateTokenAccountIxs(payer     = self.PayerPubkey(),
                                        account   = poolTokenInitialSupplyAccount.pubkey(),
                                        lamports  = lamports,
                                        tokenMint = poolTokenMint,
                                        owner     = owner)
        ixList.append(InitializeSwapIx(swap          = swap.pubkey(),
                                       authority     = swapAuthority,
                                       nonce         = swapAuthorityNonce,
                                       tokenA        = tokenA,
                                       tokenB        = tokenB,
                                       poolMint      = poolTokenMint,
                                       feeAccount    = feeAccount.pubkey(),
                                       destination   = poolTokenInitialSupplyAccount.pubkey(),
                                       fees          = fees,
                                       swapCurve     = swapCurve,
                                       swapProgramId = swapProgramId))

        self.ProcessTransaction(instructions=ixList, signers=[swap, feeAccount, poolTokenInitialSupplyAccount])
        logger.info(f"SolhelpersSwapClient::CreateSwap() {swap.pubkey()} A={MakePubkey(tokenA)}; B={MakePubkey(tokenB)}; pool mint={MakePubkey(poolTokenMint)}")
        return feeAccount, poolTokenInitialSupplyAccount

    # ========================================
    # Everything a fresh pool needs. Without makers, token A/B accounts are
    # created empty and the pool initialize will be rejected, so real callers
    # pass makers that also fund them.
    #
    def CreateSwapAndInit(self,
                          owner:             SolhelpersKeypair,
                          tokenAMint:        SolhelpersPubkey,
                          tokenBMint:        SolhelpersPubkey,
                          poolTokenDecimals: int,
                          feeOwner:          SolhelpersPubkey,
                          tokenAMaker:       Optional[TokenAccountMaker] = None,
                          tokenBMaker:       Optional[TokenAccountMaker] = None,
                          fees:              SolhelpersFees      = SolhelpersFees(),
                          swapCurve:         SolhelpersSwapCurve = SolhelpersSwapCurve(),
                          swapProgramId:     SolhelpersPubkey    = TOKEN_SWAP_PROGRAM_ID) -> SolhelpersSwapKeys:
        swapAccount: Keypair = self.CreateAccount(owner=swapProgramId, dataLength=SWAP_STATE_LEN)
        swapAuthority, swapAuthorityNonce = FindSwapAuthority(swap=swapAccount.pubkey(), swapProgramId=swapProgramId)

        tokenA: Keypair = tokenAMaker(swapAuthority) if tokenAMaker else self.CreateTokenAccount(owner=swapAuthority, tokenMint=tokenAMint)
        tokenB: Keypair = tokenBMaker(swapAuthority) if tokenBMaker else self.CreateTokenAccount(owner=swapAuthority, tokenMint=tokenBMint)
        poolTokenMint: Keypair = self.CreateTokenMint(mintAuthority=swapAuthority, decimals=poolTokenDecimals)

        feeAccount, poolTokenInitialSupplyAccount = self.CreateSwap(swapAccount        = swapAccount,
                                                                    swapAuthority      = swapAuthority,
                                                                    swapAuthorityNonce = swapAuthorityNonce,
                                                                    poolTokenMint      = poolTokenMint.pubkey(),
                                                                    tokenA             = tokenA.pubkey(),
                                                                    tokenB             = tokenB.pubkey(),
                                                                    owner              = MakeKeypair(owner).pubkey(),
                                                                    feeOwner           = feeOwner,
                                                                    fees               = fees,
                                                                    swapCurve          = swapCurve,
                                                                    swapProgramId      = swapProgramId)

        return SolhelpersSwapKeys(swap                          = swapAccount,
                                  authorityAddress              = swapAuthority,
                                  authorityNonce                = swapAuthorityNonce,
                                  tokenA                        = tokenA,
                                  tokenB                        = tokenB,
                                  poolTokenMint                 = poolTokenMint,
                                  feeAccount                    = feeAccount,
                                  poolTokenInitialSupplyAccount = poolTokenInitialSupplyAccount)

    # ========================================
    #
    def Swap(self,
             swapAccount:           SolhelpersPubkey,
             swapAuthority:         SolhelpersPubkey,
             userTransferAuthority: SolhelpersKeypair,
             source:                SolhelpersPubkey,
             poolSource:            SolhelpersPubkey,
             poolDestination:       SolhelpersPubkey,
             destination:           SolhelpersPubkey,
             poolTokenMint:         SolhelpersPubkey,
             feeAccount:            SolhelpersPubkey,
             amountIn:              int,
             minimumAmountOut:      int,
             hostFeeAccount:        SolhelpersPubkey = None,
             swapProgramId:         SolhelpersPubkey = TOKEN_SWAP_PROGRAM_ID) -> Signature:
        authority: Keypair     = MakeKeypair(userTransferAuthority)
        ix:        Instruction = SwapIx(swap                  = swapAccount,
                                        authority             = swapAuthority,
                                        userTransferAuthority = authority.pubkey(),
                                        source                = source,
                                        poolSource            = poolSource,
                                        poolDestination       = poolDestination,
                                        destination           = destination,
                                        poolMint              = poolTokenMint,
                                        feeAccount            = feeAccount,
                                        amountIn              = amountIn,
                                        minimumAmountOut      = minimumAmountOut,
                                        hostFeeAccount        = hostFeeAccount,
                                        swapProgramId         = swapProgramId)
        return self.ProcessTransaction(instructions=[ix], signers=[authority])

# =============================================================================
#
