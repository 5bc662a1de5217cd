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
# module: instructions
#
# =============================================================================
# 
from   solders.instruction    import Instruction
from   solders.pubkey         import Pubkey
from   solders.system_program import create_account, CreateAccountParams
from   spl.token.constants    import TOKEN_PROGRAM_ID, MINT_LEN, ACCOUNT_LEN
from   spl.token.instructions import get_associated_token_address, create_associated_token_account
import spl.token.instructions as     splToken
from   typing                 import List, Optional
from  .helpers                import MakePubkey, SolhelpersPubkey

# ===============================================================================
#
def CreateAccountIx(payer:      SolhelpersPubkey,
                    newAccount: SolhelpersPubkey,
                    lamports:   int,
                    space:      int,
                    owner:      SolhelpersPubkey) -> Instruction:
    return create_account(CreateAccountParams(from_pubkey = MakePubkey(payer),
                                              to_pubkey   = MakePubkey(newAccount),
                                              lamports    = lamports,
                                              space       = space,
                                              owner       = MakePubkey(owner)))

# ===============================================================================
#
def InitializeMintIx(tokenMint:       SolhelpersPubkey,
                     mintAuthority:   SolhelpersPubkey,
                     decimals:        int,
                     freezeAuthority: Optional[SolhelpersPubkey] = None) -> Instruction:
    return splToken.initialize_mint(
        splToken.InitializeMintParams(
            program_id       = TOKEN_PROGRAM_ID,
            mint             = MakePubkey(tokenMint),
            mint_authority   = MakePubkey(mintAuthority),
            decimals         = decimals,
            freeze_authority = MakePubkey(freezeAuthority),
        )
    )

# ===============================================================================
#
def InitializeAccountIx(account:   SolhelpersPubkey,
                        tokenMint: SolhelpersPubkey,
                        owner:     SolhelpersPubkey) -> Instruction:
    return splToken.initialize_account(
        splToken.InitializeAccountParams(
            program_id = TOKEN_PROGRAM_ID,
            account    = MakePubkey(account),
            mint       = MakePubkey(tokenMint),
            owner      = MakePubkey(owner),
        )
    )

# ===============================================================================
# Rent-exempt account sized for mint state, then initialized as a mint.
#
def CreateMintIxs(payer:           SolhelpersPubkey,
                  tokenMint:       SolhelpersPubkey,
                  lamports:        int,
                  mintAuthority:   SolhelpersPubkey,
                  decimals:        int,
                  freezeAuthority: Optional[SolhelpersPubkey] = None) -> List[Instruction]:
    return [
        CreateAccountIx(payer=payer, newAccount=tokenMint, lamports=lamports, space=MINT_LEN, owner=TOKEN_PROGRAM_ID),
        InitializeMintIx(tokenMint=tokenMint, mintAuthority=mintAuthority, decimals=decimals, freezeAuthority=freezeAuthority),
    ]

# ===============================================================================
# Rent-exempt account sized for token account state, then bound to mint/owner.
#
def CreateTokenAccountIxs(payer:     SolhelpersPubkey,
                          account:   SolhelpersPubkey,
                          lamports:  int,
                          tokenMint: SolhelpersPubkey,
                          owner:     SolhelpersPubkey) -> List[Instruction]:
    return [
        CreateAccountIx(payer=payer, newAccount=account, lamports=lamports, space=ACCOUNT_LEN, owner=TOKEN_PROGRAM_ID),
        InitializeAccountIx(account=account, tokenMint=tokenMint, owner=owner),
    ]

# ===============================================================================
# `mint_to` and `transfer` are deprecated, using the `_checked` variants so the
# token program verifies `decimals` against the mint.
#
def MintToCheckedIx(tokenMint:      SolhelpersPubkey,
                    destination:    SolhelpersPubkey,
                    mintAuthority:  SolhelpersPubkey,
                    amountLamports: int,
                    decimals:       int) -> Instruction:
    return splToken.mint_to_checked(
        splToken.MintToCheckedParams(
            program_id     = TOKEN_PROGRAM_ID,
            mint           = MakePubkey(tokenMint),
            dest           = MakePubkey(destination),
            mint_authority = MakePubkey(mintAuthority),
            amount         = amountLamports,
            decimals       = decimals,
        )
    )

def TransferCheckedIx(tokenMint:      SolhelpersPubkey,
                      source:         SolhelpersPubkey,
                      destination:    SolhelpersPubkey,
                      owner:          SolhelpersPubkey,
                      amountLamports: int,
                      decimals:       int) -> Instruction:
    return splToken.transfer_checked(
        splToken.TransferCheckedParams(
            program_id = TOKEN_PROGRAM_ID,
            source     = MakePubkey(source),
            mint       = MakePubkey(tokenMint),
            dest       = MakePubkey(destination),
            owner      = MakePubkey(owner),
            amount     = amountLamports,
            decimals   = decimals,
        )
    )

# ===============================================================================
#
def CloseAccountIx(account:     SolhelpersPubkey,
                   destination: SolhelpersPubkey,
                   owner:       SolhelpersPubkey) -> Instruction:
    return splToken.close_account(
        splToken.CloseAccountParams(
            program_id = TOKEN_PROGRAM_ID,
            account    = MakePubkey(account),
            dest       = MakePubkey(destination),
            owner      = MakePubkey(owner),
        )
    )

# ===============================================================================
# Associated token accounts: PDA of (wallet, token program, mint) under the
# associated token program, no registry needed.
#
def GetAta(tokenMint: SolhelpersPubkey, owner: SolhelpersPubkey) -> Pubkey:
    return get_associated_token_address(owner=MakePubkey(owner), mint=MakePubkey(tokenMint))

def CreateAtaIx(tokenMint: SolhelpersPubkey, owner: SolhelpersPubkey, payer: SolhelpersPubkey) -> Instruction:
    return create_associated_token_account(payer=MakePubkey(payer), owner=MakePubkey(owner), mint=MakePubkey(tokenMint))

# ===============================================================================
#
