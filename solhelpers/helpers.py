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
# module: helpers
#
# =============================================================================
# 
from   solders.pubkey  import Pubkey
from   solders.keypair import Keypair
from   typing          import Union
from   pybip39         import Mnemonic, Seed
import logging
import json
import os

# ================================================================================
#
LAMPORTS_PER_SOL:   int    = 1_000_000_000
# Local test validator, accepts airdrops
LOCALNET_URL:       str    = "http://localhost:8899"
# BIP39 mnemonic lengths, used to tell a seed phrase from a base58 secret
MNEMONIC_WORD_COUNTS       = (12, 15, 18, 21, 24)
SOLANA_DERIVATION_PATH     = "m/44'/501'/0'/0'"

# ================================================================================
# Create path if it doesn't exist
#
def EnsurePathExists(path: str):
    if path == "":
        return
    if not os.path.exists(path):
        os.makedirs(path, exist_ok = True)

# ================================================================================
#
def SetupLogging(fileName: str = "log.log",
                 format:   str = "%(name)s: %(asctime)s | %(levelname)s | %(filename)s:%(lineno)s | %(process)d >>> %(message)s",
                 dateFmt:  str = "%Y-%m-%dT%H:%M:%SZ",
                 logLevel: int = logging.INFO):
    EnsurePathExists(os.path.dirname(fileName))
    logging.basicConfig(filename=fileName, filemode="a", format=format, datefmt=dateFmt, level=logLevel)
    logging.getLogger().addHandler(logging.StreamHandler())

# ================================================================================
# Either Pubkey string or Pubkey or anything that can be a Pubkey
#
SolhelpersPubkey = Union[str, bytes, Keypair, Pubkey]
#
def MakePubkey(pubkey: SolhelpersPubkey) -> Pubkey:
    if pubkey is None:
        return None

    if isinstance(pubkey, Pubkey):
        return pubkey
    if isinstance(pubkey, Keypair):
        return pubkey.pubkey()
    elif isinstance(pubkey, bytes):
        return Pubkey.from_bytes(pubkey)
    elif isinstance(pubkey, str):
        return Pubkey.from_string(pubkey)
    raise TypeError(f"MakePubkey(): can't make Pubkey from {type(pubkey).__name__}!")

# ================================================================================
# Either Keypair JSON file path or Keypair or anything that can be a Keypair:
#   - keypair JSON file (solana-keygen format);
#   - JSON array string;
#   - BIP39 mnemonic (Phantom/Solflare derivation path);
#   - base58 secret key.
#
SolhelpersKeypair = Union[str, bytes, Keypair]
#
def MakeKeypair(keypair: SolhelpersKeypair) -> Keypair:
    if keypair is None:
        return None

    if isinstance(keypair, Keypair):
        return keypair
    elif isinstance(keypair, bytes):
        return Keypair.from_bytes(keypair)
    elif not isinstance(keypair, str):
        raise TypeError(f"MakeKeypair(): can't make Keypair from {type(keypair).__name__}!")

    if os.path.isfile(keypair):
        with open(keypair) as f:
            return Keypair.from_bytes(bytes(json.load(f)))

    text = keypair.strip()
    if text.startswith("["):
        return Keypair.from_json(text)

    if len(text.split()) in MNEMONIC_WORD_COUNTS:
        mnemonic = Mnemonic.from_phrase(text)
        seed     = Seed(mnemonic=mnemonic, password="")
        return Keypair.from_seed_and_derivation_path(seed=bytes(seed), dpath=SOLANA_DERIVATION_PATH)

    return Keypair.from_base58_string(text)

# ================================================================================
#
