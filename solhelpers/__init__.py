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
# module: main
#
# =============================================================================
# 
from solhelpers.helpers import EnsurePathExists,             \
                               SetupLogging,                 \
                               SolhelpersPubkey,             \
                               MakePubkey,                   \
                               SolhelpersKeypair,            \
                               MakeKeypair,                  \
                               LAMPORTS_PER_SOL,             \
                               LOCALNET_URL

from solhelpers.errors import SolhelpersError,          \
                              SolhelpersTransportError, \
                              SolhelpersProgramError

from solhelpers.rpc import SolhelpersTxParams, \
                           SolhelpersRpc,      \
                           SolhelpersRpcClient

from solhelpers.tx import DedupeSigners, \
                          SolhelpersTx

from solhelpers.ix import CreateAccountIx,       \
                          InitializeMintIx,      \
                          InitializeAccountIx,   \
                          CreateMintIxs,         \
                          CreateTokenAccountIxs, \
                          MintToCheckedIx,       \
                          TransferCheckedIx,     \
                          CloseAccountIx,        \
                          GetAta,                \
                          CreateAtaIx

from solhelpers.programs.token_swap import SolhelpersFees,        \
                                           SolhelpersSwapCurve,   \
                                           InitializeSwapIx,      \
                                           SwapIx,                \
                                           FindSwapAuthority,     \
                                           TOKEN_SWAP_PROGRAM_ID

from solhelpers.client import RENT_EXEMPT, SolhelpersClient

from solhelpers.token import SolhelpersTokenClient

from solhelpers.swap import SolhelpersSwapKeys, SolhelpersSwapClient

# =============================================================================
# 
