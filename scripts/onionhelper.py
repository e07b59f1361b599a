#!/usr/bin/env python3
"""Onionhelper CLI for onionlayer interoperability testing.

Every command reads its JSON input from stdin (where it takes one) and writes
a single JSON object to stdout.
"""

import asyncio
import json
import os
import sys

from onionlayer import (
    NodeIdentity,
    OnionLayerError,
    RegistryClient,
    RegistrySettings,
    export_private_key,
    export_public_key,
    export_symmetric_key,
    generate_key_pair,
    generate_symmetric_key,
    import_private_key,
    rsa_decrypt,
    rsa_encrypt,
    sym_decrypt,
    sym_encrypt,
)


def gen_keypair() -> None:
    """Generate an RSA key pair and output both halves."""
    key_pair = generate_key_pair()
    output = {
        "publicKey": export_public_key(key_pair.public_key),
        "privateKey": export_private_key(key_pair.private_key),
    }
    print(json.dumps(output))


def gen_symkey() -> None:
    """Generate a symmetric key and output its export."""
    print(json.dumps({"key": export_symmetric_key(generate_symmetric_key())}))


def cmd_rsa_encrypt() -> None:
    """Encrypt {"data", "publicKey"} from stdin."""
    data = json.loads(sys.stdin.read())
    print(json.dumps({"result": rsa_encrypt(data["data"], data["publicKey"])}))


def cmd_rsa_decrypt() -> None:
    """Decrypt {"data", "privateKey"} from stdin."""
    data = json.loads(sys.stdin.read())
    private_key = import_private_key(data["privateKey"])
    print(json.dumps({"result": rsa_decrypt(data["data"], private_key)}))


def cmd_sym_encrypt() -> None:
    """Encrypt {"data", "key"} from stdin."""
    data = json.loads(sys.stdin.read())
    print(json.dumps({"result": sym_encrypt(data["key"], data["data"])}))


def cmd_sym_decrypt() -> None:
    """Decrypt {"data", "key"} from stdin."""
    data = json.loads(sys.stdin.read())
    print(json.dumps({"result": sym_decrypt(data["key"], data["data"])}))


async def register(node_id: int) -> None:
    """Generate an identity for node_id and register it with the directory.

    With ONIONLAYER_ENABLE_DEBUG_ROUTES set, the private key is also deposited
    in the directory's debug key store.
    """
    identity = NodeIdentity.generate(node_id)
    debug = RegistrySettings.from_env().enable_debug_routes
    async with RegistryClient(
        base_url=os.environ.get("ONIONLAYER_REGISTRY_URL", "http://localhost:8080"),
    ) as client:
        await client.register_identity(identity)
        if debug:
            await client.debug_register_key_pair(identity)
    output = {
        "nodeId": identity.node_id,
        "publicKey": identity.public_key_b64,
        "privateKey": identity.private_key_b64,
    }
    print(json.dumps(output))


async def list_nodes() -> None:
    """Output the directory listing."""
    async with RegistryClient(
        base_url=os.environ.get("ONIONLAYER_REGISTRY_URL", "http://localhost:8080"),
    ) as client:
        nodes = await client.list_nodes()
    print(json.dumps({"nodes": [node.to_dict() for node in nodes]}))


COMMANDS = {
    "gen-keypair": gen_keypair,
    "gen-symkey": gen_symkey,
    "rsa-encrypt": cmd_rsa_encrypt,
    "rsa-decrypt": cmd_rsa_decrypt,
    "sym-encrypt": cmd_sym_encrypt,
    "sym-decrypt": cmd_sym_decrypt,
}


def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        print("usage: onionhelper.py <command> [args]", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]

    try:
        if command == "register":
            if len(sys.argv) < 3:
                print("usage: onionhelper.py register <nodeId>", file=sys.stderr)
                sys.exit(1)
            asyncio.run(register(int(sys.argv[2])))
        elif command == "list-nodes":
            asyncio.run(list_nodes())
        elif command in COMMANDS:
            COMMANDS[command]()
        else:
            print(f"unknown command: {command}", file=sys.stderr)
            sys.exit(1)
    except (OnionLayerError, ValueError, KeyError) as e:
        print(json.dumps({"error": type(e).__name__, "message": str(e)}))
        sys.exit(2)


if __name__ == "__main__":
    main()
