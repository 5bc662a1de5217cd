"""
End-to-end against a running validator:

    solana-test-validator &
    SOLHELPERS_RPC_URL=http://localhost:8899 pytest -m integration
"""

import os

import pytest
from solders.keypair import Keypair
from spl.token.constants import ACCOUNT_LEN, WRAPPED_SOL_MINT

from solhelpers import SolhelpersProgramError, SolhelpersSwapClient
from solhelpers.snippets.token_transfer import SolhelpersTokenTransferDemo

RPC_URL = os.getenv("SOLHELPERS_RPC_URL")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not RPC_URL, reason="SOLHELPERS_RPC_URL is not set"),
]


@pytest.fixture
def funded_client():
    client = SolhelpersSwapClient(connection=RPC_URL, payer=Keypair())
    client.Airdrop(recipient=client.PayerPubkey(), lamports=10_000_000_000)
    return client


def test_token_transfer_scenario():
    results = SolhelpersTokenTransferDemo(connection=RPC_URL).Start()

    assert results["payer_lamports"] == 10_000_000_000
    assert results["minted"] == 10.00
    assert results["sender"] == 5.00
    assert results["recipient"] == 5.00


def test_transfer_more_than_balance_is_rejected(funded_client):
    client = funded_client
    sender = Keypair()
    mint = client.CreateTokenMint(mintAuthority=sender.pubkey(), decimals=0).pubkey()
    source = client.CreateAssociatedTokenAccountByPayer(recipient=sender.pubkey(), tokenMint=mint)
    destination = client.CreateTokenAccount(owner=Keypair().pubkey(), tokenMint=mint).pubkey()
    client.MintTo(mintAuthority=sender, tokenMint=mint, account=source, amountLamports=100, decimals=0)

    with pytest.raises(SolhelpersProgramError):
        client.TransferTo(owner=sender, tokenMint=mint, source=source, destination=destination,
                          amountLamports=101, decimals=0)

    assert client.GetTokenAccountBalance(source).amount == "100"
    assert client.GetTokenAccountBalance(destination).amount == "0"


def test_wrong_decimals_are_rejected(funded_client):
    client = funded_client
    authority = Keypair()
    mint = client.CreateTokenMint(mintAuthority=authority.pubkey(), decimals=2).pubkey()
    account = client.CreateTokenAccount(owner=authority.pubkey(), tokenMint=mint).pubkey()

    with pytest.raises(SolhelpersProgramError):
        client.MintTo(mintAuthority=authority, tokenMint=mint, account=account, amountLamports=1, decimals=3)


def test_close_empty_token_account_refunds_rent(funded_client):
    client = funded_client
    owner = Keypair()
    destination = Keypair().pubkey()
    mint = client.CreateTokenMint(mintAuthority=owner.pubkey(), decimals=0).pubkey()
    account = client.CreateTokenAccount(owner=owner.pubkey(), tokenMint=mint).pubkey()
    rent = client.GetBalance(account)

    client.CloseTokenAccount(owner=owner, account=account, destination=destination)

    assert client.GetBalance(destination) == rent
    with pytest.raises(SolhelpersProgramError):
        client.TransferTo(owner=owner, tokenMint=mint, source=account, destination=destination,
                          amountLamports=0, decimals=0)


def test_close_wrapped_sol_account_with_balance_credits_all_lamports(funded_client):
    client = funded_client
    owner = Keypair()
    destination = Keypair().pubkey()
    lamports = client.RentMinimumBalance(ACCOUNT_LEN) + 500_000_000
    account = client.CreateTokenAccountWithLamports(owner=owner.pubkey(), tokenMint=WRAPPED_SOL_MINT,
                                                    lamports=lamports).pubkey()
    assert client.GetTokenAccountBalance(account).amount == "500000000"
    before = client.GetBalance(destination)

    client.CloseTokenAccount(owner=owner, account=account, destination=destination)

    assert client.GetBalance(destination) - before == lamports
    assert client.GetBalance(account) == 0


def test_close_token_account_holding_tokens_is_rejected(funded_client):
    client = funded_client
    owner = Keypair()
    mint = client.CreateTokenMint(mintAuthority=owner.pubkey(), decimals=0).pubkey()
    account = client.CreateTokenAccount(owner=owner.pubkey(), tokenMint=mint).pubkey()
    client.MintTo(mintAuthority=owner, tokenMint=mint, account=account, amountLamports=7, decimals=0)
    rent = client.GetBalance(account)

    with pytest.raises(SolhelpersProgramError):
        client.CloseTokenAccount(owner=owner, account=account, destination=Keypair().pubkey())

    assert client.GetTokenAccountBalance(account).amount == "7"
    assert client.GetBalance(account) == rent
