"""Look up the account a mountpoint is signed in with."""

import json
from pathlib import Path


def get_account_name(cache_dir: Path, escaped_mount: str) -> str:
    """Read the account name from a mountpoint's ``auth_tokens.json``.

    Raises:
        OSError: If the token file cannot be read
        ValueError: If the file is not JSON or has no account
    """
    token_file = cache_dir / escaped_mount / "auth_tokens.json"
    with token_file.open() as fh:
        try:
            tokens = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {token_file}: {e}") from e
    account = tokens.get("account") if isinstance(tokens, dict) else None
    if not account:
        raise ValueError(f"No account recorded in {token_file}")
    return str(account)
