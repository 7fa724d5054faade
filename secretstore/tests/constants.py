SESSION_URL = "http://127.0.0.1:8090"
RPC_URL = "http://127.0.0.1:8545"

SERVER_KEY_ID = "0x" + "ab" * 32
SIGNED_SERVER_KEY_ID = "0x" + "cd" * 65
KEY_ID_HEX = "ab" * 32
SIGNED_KEY_ID_HEX = "cd" * 65

ACCOUNT = "0x00a329c0648769a73afac7f9381e08fb43dbea72"
PASSWORD = "alicepwd"

COMMON_POINT = "0x" + "11" * 64
ENCRYPTED_POINT = "0x" + "22" * 64
ENCRYPTED_KEY = "0x" + "33" * 97
DECRYPTED_SECRET = "0x" + "44" * 64
DECRYPT_SHADOWS = ("0x" + "55" * 81, "0x" + "66" * 81)
