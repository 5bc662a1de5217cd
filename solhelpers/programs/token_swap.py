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
# module: token_swap
#
# SPL Token-Swap (constant product AMM) instruction encoding.
# https://github.com/solana-labs/solana-program-library/tree/master/token-swap
#
# =============================================================================
# 
import typing
from   dataclasses         import dataclass
from   solders.instruction import Instruction, AccountMeta
from   solders.pubkey      import Pubkey
from   spl.token.constants import TOKEN_PROGRAM_ID
import borsh_construct     as borsh
from ..helpers             import MakePubkey, SolhelpersPubkey

# =============================================================================
# 
TOKEN_SWAP_PROGRAM_ID: Pubkey = Pubkey.from_string("SwapsVeCiPHMUAtzQWZw7RjsKjgCjhwU55QGu4U1Szw")
SWAP_STATE_LEN:        int    = 324 # version byte + SwapV1

INSTRUCTION_INITIALIZE: int = 0
INSTRUCTION_SWAP:       int = 1

CURVE_CONSTANT_PRODUCT: int = 0
CURVE_CONSTANT_PRICE:   int = 1
CURVE_CALCULATOR_LEN:   int = 32

# =============================================================================
# 
@dataclass
class SolhelpersFees:
    layout: typing.ClassVar = borsh.CStruct(
        "trade_fee_numerator"            / borsh.U64,
        "trade_fee_denominator"          / borsh.U64,
        "owner_trade_fee_numerator"      / borsh.U64,
        "owner_trade_fee_denominator"    / borsh.U64,
        "owner_withdraw_fee_numerator"   / borsh.U64,
        "owner_withdraw_fee_denominator" / borsh.U64,
        "host_fee_numerator"             / borsh.U64,
        "host_fee_denominator"           / borsh.U64,
    )
    tradeFeeNumerator:           int = 25
    tradeFeeDenominator:         int = 10000
    ownerTradeFeeNumerator:      int = 5
    ownerTradeFeeDenominator:    int = 10000
    ownerWithdrawFeeNumerator:   int = 0
    ownerWithdrawFeeDenominator: int = 0
    hostFeeNumerator:            int = 20
    hostFeeDenominator:          int = 100

    # ========================================
    #
    def to_encodable(self) -> dict:
        return {
            "trade_fee_numerator":            self.tradeFeeNumerator,
            "trade_fee_denominator":          self.tradeFeeDenominator,
            "owner_trade_fee_numerator":      self.ownerTradeFeeNumerator,
            "owner_trade_fee_denominator":    self.ownerTradeFeeDenominator,
            "owner_withdraw_fee_numerator":   self.ownerWithdrawFeeNumerator,
            "owner_withdraw_fee_denominator": self.ownerWithdrawFeeDenominator,
            "host_fee_numerator":             self.hostFeeNumerator,
            "host_fee_denominator":           self.hostFeeDenominator,
        }

    # ========================================
    #
    @classmethod
    def decode(cls, data: bytes) -> "SolhelpersFees":
        dec = SolhelpersFees.layout.parse(data)
        return cls(tradeFeeNumerator           = dec.trade_fee_numerator,
                   tradeFeeDenominator         = dec.trade_fee_denominator,
                   ownerTradeFeeNumerator      = dec.owner_trade_fee_numerator,
                   ownerTradeFeeDenominator    = dec.owner_trade_fee_denominator,
                   ownerWithdrawFeeNumerator   = dec.owner_withdraw_fee_numerator,
                   ownerWithdrawFeeDenominator = dec.owner_withdraw_fee_denominator,
                   hostFeeNumerator            = dec.host_fee_numerator,
                   hostFeeDenominator          = dec.host_fee_denominator)

# =============================================================================
# Curve type + 32 bytes of calculator state. Constant product has no state,
# constant price stores token B price, offset stores token B offset (both u64).
#
@dataclass
class SolhelpersSwapCurve:
    layout: typing.ClassVar = borsh.CStruct(
        "curve_type" / borsh.U8,
        "calculator" / borsh.U8[CURVE_CALCULATOR_LEN],
    )
    curveType: int = CURVE_CONSTANT_PRODUCT
    parameter: int = 0

    def to_encodable(self) -> dict:
        calculator: bytes = b"" if self.curveType == CURVE_CONSTANT_PRODUCT else self.parameter.to_bytes(8, "little")
        return {
            "curve_type": self.curveType,
            "calculator": list(calculator.ljust(CURVE_CALCULATOR_LEN, b"\x00")),
        }

# =============================================================================
# 
INITIALIZE_LAYOUT = borsh.CStruct(
    "instruction" / borsh.U8,
    "nonce"       / borsh.U8,
    "fees"        / SolhelpersFees.layout,
    "swap_curve"  / SolhelpersSwapCurve.layout,
)

SWAP_LAYOUT = borsh.CStruct(
    "instruction"        / borsh.U8,
    "amount_in"          / borsh.U64,
    "minimum_amount_out" / borsh.U64,
)

# =============================================================================
# Creates a pool. `tokenA`/`tokenB` must be owned by `authority` and funded,
# `poolMint` must have `authority` as mint authority and zero supply.
#
def InitializeSwapIx(swap:           SolhelpersPubkey,
                     authority:      SolhelpersPubkey,
                     nonce:          int,
                     tokenA:         SolhelpersPubkey,
                     tokenB:         SolhelpersPubkey,
                     poolMint:       SolhelpersPubkey,
                     feeAccount:     SolhelpersPubkey,
                     destination:    SolhelpersPubkey,
                     fees:           SolhelpersFees      = SolhelpersFees(),
                     swapCurve:      SolhelpersSwapCurve = SolhelpersSwapCurve(),
                     swapProgramId:  SolhelpersPubkey    = TOKEN_SWAP_PROGRAM_ID,
                     tokenProgramId: SolhelpersPubkey    = TOKEN_PROGRAM_ID) -> Instruction:
    data: bytes = INITIALIZE_LAYOUT.build({
        "instruction": INSTRUCTION_INITIALIZE,
        "nonce":       nonce,
        "fees":        fees.to_encodable(),
        "swap_curve":  swapCurve.to_encodable(),
    })
    accounts = [
        AccountMeta(pubkey=MakePubkey(swap),           is_signer=True,  is_writable=True ),
        AccountMeta(pubkey=MakePubkey(authority),      is_signer=False, is_writable=False),
        AccountMeta(pubkey=MakePubkey(tokenA),         is_signer=False, is_writable=False),
        AccountMeta(pubkey=MakePubkey(tokenB),         is_signer=False, is_writable=False),
        AccountMeta(pubkey=MakePubkey(poolMint),       is_signer=False, is_writable=True ),
        AccountMeta(pubkey=MakePubkey(feeAccount),     is_signer=False, is_writable=False),
        AccountMeta(pubkey=MakePubkey(destination),    is_signer=False, is_writable=True ),
        AccountMeta(pubkey=MakePubkey(tokenProgramId), is_signer=False, is_writable=False),
    ]
    return Instruction(program_id=MakePubkey(swapProgramId), data=data, accounts=accounts)

# =============================================================================
# `userTransferAuthority` must own (or be delegated on) `source`.
#
def SwapIx(swap:                  SolhelpersPubkey,
           authority:             SolhelpersPubkey,
           userTransferAuthority: SolhelpersPubkey,
           source:                SolhelpersPubkey,
           poolSource:            SolhelpersPubkey,
           poolDestination:       SolhelpersPubkey,
           destination:           SolhelpersPubkey,
           poolMint:              SolhelpersPubkey,
           feeAccount:            SolhelpersPubkey,
           amountIn:              int,
           minimumAmountOut:      int,
           hostFeeAccount:        SolhelpersPubkey = None,
           swapProgramId:         SolhelpersPubkey = TOKEN_SWAP_PROGRAM_ID,
           tokenProgramId:        SolhelpersPubkey = TOKEN_PROGRAM_ID) -> Instruction:
    data: bytes = SWAP_LAYOUT.build({
        "instruction":        INSTRUCTION_SWAP,
        "amount_in":          amountIn,
        "minimum_amount_out": minimumAmountOut,
    })
    accounts = [
        AccountMeta(pubkey=MakePubkey(swap),                  is_signer=False, is_writable=False),
        AccountMeta(pubkey=MakePubkey(authority),             is_signer=False, is_writable=False),
        AccountMeta(pubkey=MakePubkey(userTransferAuthority), is_signer=True,  is_writable=False),
        AccountMeta(pubkey=MakePubkey(source),                is_signer=False, is_writable=True ),
        AccountMeta(pubkey=MakePubkey(poolSource),            is_signer=False, is_writable=True ),
        AccountMeta(pubkey=MakePubkey(poolDestination),       is_signer=False, is_writable=True ),
        AccountMeta(pubkey=MakePubkey(destination),           is_signer=False, is_writable=True ),
        AccountMeta(pubkey=MakePubkey(poolMint),              is_signer=False, is_writable=True ),
        AccountMeta(pubkey=MakePubkey(feeAccount),            is_signer=False, is_writable=True ),
        AccountMeta(pubkey=MakePubkey(tokenProgramId),        is_signer=False, is_writable=False),
    ]
    if hostFeeAccount is not None:
        accounts.append(AccountMeta(pubkey=MakePubkey(hostFeeAccount), is_signer=False, is_writable=True))
    return Instruction(program_id=MakePubkey(swapProgramId), data=data, accounts=accounts)

# =============================================================================
# Swap authority is a PDA of the swap state account; nonce is its bump seed.
#
def FindSwapAuthority(swap: SolhelpersPubkey, swapProgramId: SolhelpersPubkey = TOKEN_SWAP_PROGRAM_ID) -> typing.Tuple[Pubkey, int]:
    return Pubkey.find_program_address([bytes(MakePubkey(swap))], MakePubkey(swapProgramId))

# =============================================================================
# 
