"""
Tests for solhelpers.helpers and signer dedupe
"""

import json

import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from solhelpers import MakeKeypair, MakePubkey, DedupeSigners


def test_make_pubkey_accepts_all_forms():
    """Pubkey, Keypair, bytes and base58 string all give the same Pubkey"""
    keypair = Keypair()
    pubkey = keypair.pubkey()

    assert MakePubkey(pubkey) == pubkey
    assert MakePubkey(keypair) == pubkey
    assert MakePubkey(bytes(pubkey)) == pubkey
    assert MakePubkey(str(pubkey)) == pubkey
    assert MakePubkey(None) is None


def test_make_pubkey_rejects_unknown_type():
    with pytest.raises(TypeError):
        MakePubkey(12345)


def test_make_keypair_from_bytes_json_and_base58():
    keypair = Keypair()

    assert MakeKeypair(keypair) is keypair
    assert MakeKeypair(bytes(keypair)).pubkey() == keypair.pubkey()
    assert MakeKeypair(keypair.to_json()).pubkey() == keypair.pubkey()
    assert MakeKeypair(str(keypair)).pubkey() == keypair.pubkey()


def test_make_keypair_from_keygen_file(tmp_path):
    """solana-keygen writes the 64 secret bytes as a JSON array"""
    keypair = Keypair()
    path = tmp_path / "id.json"
    path.write_text(json.dumps(list(bytes(keypair))))

    assert MakeKeypair(str(path)).pubkey() == keypair.pubkey()


def test_make_keypair_from_mnemonic_is_deterministic():
    phrase = " ".join(["abandon"] * 11 + ["about"])

    first = MakeKeypair(phrase)
    second = MakeKeypair(phrase)

    assert isinstance(first.pubkey(), Pubkey)
    assert first.pubkey() == second.pubkey()


def test_dedupe_signers_keeps_first_occurrence_order():
    payer = Keypair()
    other = Keypair()

    result = DedupeSigners([payer, other, payer, Keypair.from_bytes(bytes(other))])

    assert [s.pubkey() for s in result] == [payer.pubkey(), other.pubkey()]
    assert result[0] is payer
