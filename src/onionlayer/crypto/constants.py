"""Cryptographic constants for onionlayer."""

# RSA-OAEP key parameters
RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537

# OAEP uses SHA-256 for both the label hash and MGF1
SHA256_DIGEST_SIZE = 32

# Largest OAEP plaintext: k - 2 * hLen - 2 (190 bytes for a 2048-bit modulus)
RSA_OAEP_MAX_PLAINTEXT_SIZE = RSA_KEY_SIZE // 8 - 2 * SHA256_DIGEST_SIZE - 2

# AES-256-GCM constants
AES_KEY_SIZE = 32
AES_GCM_NONCE_SIZE = 12
AES_GCM_TAG_SIZE = 16

# Single message for every decryption failure, whatever the cause
DECRYPTION_FAILED_MESSAGE = "Decryption failed"
