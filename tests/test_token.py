"""
Tests for SolhelpersTokenClient: instruction sets and signer sets
"""

from solders.keypair import Keypair
from solders.system_program import ID as SYSTEM_PROGRAM_ID
from spl.token.constants import ACCOUNT_LEN, MINT_LEN, TOKEN_PROGRAM_ID

from tests.conftest import InstructionAccounts, ProgramIds, Signers

# SPL Token instruction tags
INITIALIZE_MINT = 0
INITIALIZE_ACCOUNT = 1
CLOSE_ACCOUNT = 9
TRANSFER_CHECKED = 12
MINT_TO_CHECKED = 14


def _data(tx, index: int) -> bytes:
    return bytes(tx.message.instructions[index].data)


def test_create_token_mint_is_one_atomic_transaction(client, rpc, payer):
    authority = Keypair().pubkey()

    mint = client.CreateTokenMint(mintAuthority=authority, decimals=2)

    assert rpc.rentRequests == [MINT_LEN]
    assert len(rpc.sent) == 1
    tx = rpc.sent[0]
    assert ProgramIds(tx) == [SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID]
    assert Signers(tx) == {payer.pubkey(), mint.pubkey()}

    init = _data(tx, 1)
    assert init[0] == INITIALIZE_MINT
    assert init[1] == 2
    assert init[2:34] == bytes(authority)


def test_create_token_account_binds_mint_and_owner(client, rpc, payer):
    owner = Keypair().pubkey()
    mint = Keypair().pubkey()

    account = client.CreateTokenAccount(owner=owner, tokenMint=mint)

    assert rpc.rentRequests == [ACCOUNT_LEN]
    tx = rpc.sent[0]
    assert ProgramIds(tx) == [SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID]
    assert _data(tx, 1)[0] == INITIALIZE_ACCOUNT
    assert InstructionAccounts(tx, 1)[:3] == [account.pubkey(), mint, owner]
    assert Signers(tx) == {payer.pubkey(), account.pubkey()}


def test_create_token_account_with_lamports_skips_rent_query(client, rpc):
    client.CreateTokenAccountWithLamports(owner=Keypair().pubkey(), tokenMint=Keypair().pubkey(), lamports=3_000_000)

    assert rpc.rentRequests == []
    assert int.from_bytes(_data(rpc.sent[0], 0)[4:12], "little") == 3_000_000


def test_mint_to_is_checked_and_signed_by_authority(client, rpc, payer):
    authority = Keypair()
    mint = Keypair().pubkey()
    destination = Keypair().pubkey()

    client.MintTo(mintAuthority=authority, tokenMint=mint, account=destination, amountLamports=1000, decimals=2)

    tx = rpc.sent[0]
    data = _data(tx, 0)
    assert ProgramIds(tx) == [TOKEN_PROGRAM_ID]
    assert data[0] == MINT_TO_CHECKED
    assert int.from_bytes(data[1:9], "little") == 1000
    assert data[9] == 2
    assert InstructionAccounts(tx, 0) == [mint, destination, authority.pubkey()]
    assert Signers(tx) == {payer.pubkey(), authority.pubkey()}


def test_mint_to_by_payer_signs_once(client, rpc, payer):
    client.MintTo(mintAuthority=payer, tokenMint=Keypair().pubkey(), account=Keypair().pubkey(), amountLamports=1, decimals=0)

    assert rpc.sent[0].message.header.num_required_signatures == 1


def test_transfer_to_is_checked_and_signed_by_owner(client, rpc, payer):
    owner = Keypair()
    mint = Keypair().pubkey()
    source = Keypair().pubkey()
    destination = Keypair().pubkey()

    client.TransferTo(owner=owner, tokenMint=mint, source=source, destination=destination, amountLamports=500, decimals=2)

    tx = rpc.sent[0]
    data = _data(tx, 0)
    assert data[0] == TRANSFER_CHECKED
    assert int.from_bytes(data[1:9], "little") == 500
    assert data[9] == 2
    assert InstructionAccounts(tx, 0) == [source, mint, destination, owner.pubkey()]
    assert Signers(tx) == {payer.pubkey(), owner.pubkey()}


def test_close_token_account_returns_rent_to_destination(client, rpc, payer):
    owner = Keypair()
    account = Keypair().pubkey()
    destination = Keypair().pubkey()

    client.CloseTokenAccount(owner=owner, account=account, destination=destination)

    tx = rpc.sent[0]
    assert _data(tx, 0) == bytes([CLOSE_ACCOUNT])
    assert InstructionAccounts(tx, 0) == [account, destination, owner.pubkey()]
    assert Signers(tx) == {payer.pubkey(), owner.pubkey()}
