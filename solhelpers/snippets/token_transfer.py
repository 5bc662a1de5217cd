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
# module: token_transfer
#
# Airdrop, mint, ATA, mint_to, transfer: the whole token lifecycle against a
# local validator (`solana-test-validator`).
#
#   python -m solhelpers.snippets.token_transfer [RPC_URL]
#
# =============================================================================
# 
from   solana.rpc.api  import Client
from   solders.keypair import Keypair
from   solders.pubkey  import Pubkey
from   typing          import Union
from ..helpers         import LOCALNET_URL, SetupLogging
from ..swap            import SolhelpersSwapClient
import logging
import sys

logger = logging.getLogger("solhelpers")

# =============================================================================
# 
class SolhelpersTokenTransferDemo:
    def __init__(self,
                 connection:       Union[str, Client] = LOCALNET_URL,
                 airdropLamports:  int = 10_000_000_000,
                 decimals:         int = 2,
                 mintLamports:     int = 1000,
                 transferLamports: int = 500):

        self.CLIENT:            SolhelpersSwapClient = SolhelpersSwapClient(connection=connection, payer=Keypair())
        self.SENDER:            Keypair              = Keypair()
        self.RECIPIENT:         Keypair              = Keypair()
        self.AIRDROP_LAMPORTS:  int                  = airdropLamports
        self.DECIMALS:          int                  = decimals
        self.MINT_LAMPORTS:     int                  = mintLamports
        self.TRANSFER_LAMPORTS: int                  = transferLamports
        self.RESULTS:           dict                 = {}

    # ========================================
    #
    def Start(self) -> dict:
        client = self.CLIENT
        client.Airdrop(recipient=client.PayerPubkey(), lamports=self.AIRDROP_LAMPORTS)
        self.RESULTS["payer_lamports"] = client.GetBalance(client.PayerPubkey())

        tokenMint:        Pubkey = client.CreateTokenMint(mintAuthority=self.SENDER.pubkey(), decimals=self.DECIMALS).pubkey()
        senderAccount:    Pubkey = client.CreateAssociatedTokenAccountByPayer(recipient=self.SENDER.pubkey(),    tokenMint=tokenMint)
        recipientAccount: Pubkey = client.CreateAssociatedTokenAccountByPayer(recipient=self.RECIPIENT.pubkey(), tokenMint=tokenMint)

        client.MintTo(mintAuthority  = self.SENDER,
                      tokenMint      = tokenMint,
                      account        = senderAccount,
                      amountLamports = self.MINT_LAMPORTS,
                      decimals       = self.DECIMALS)
        self.RESULTS["minted"] = client.GetTokenAccountBalance(senderAccount).ui_amount

        client.TransferTo(owner          = self.SENDER,
                          tokenMint      = tokenMint,
                          source         = senderAccount,
                          destination    = recipientAccount,
                          amountLamports = self.TRANSFER_LAMPORTS,
                          decimals       = self.DECIMALS)
        self.RESULTS["sender"]    = client.GetTokenAccountBalance(senderAccount).ui_amount
        self.RESULTS["recipient"] = client.GetTokenAccountBalance(recipientAccount).ui_amount

        for name, value in self.RESULTS.items():
            logger.info(f"{name:<16} {value}")
        return self.RESULTS

# =============================================================================
# 
if __name__ == "__main__":
    SetupLogging(fileName="logs/token_transfer.log")
    SolhelpersTokenTransferDemo(connection=sys.argv[1] if len(sys.argv) > 1 else LOCALNET_URL).Start()

# =============================================================================
# 
