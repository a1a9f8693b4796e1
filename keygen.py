"""
Keyproof Key Generator
======================

Creates an RSA key pair, writes it as

  * ``<prefix>_rsa_<YYYYmmdd_HHMMSS>``      PKCS#1 PEM private key
  * ``<prefix>_rsa_<YYYYmmdd_HHMMSS>.pub``  ``ssh-rsa <blob> <user@host>``

and then proves the files work by decoding them independently with
:mod:`keyproof` and running an encrypt/decrypt round trip.

The output directory is taken from ``KEYPROOF_OUTPUT_DIR`` (falling back to
the current working directory) and the filename prefix from
``KEYPROOF_PREFIX``.

Run ``python keygen.py [bits]`` for a console run.
"""

from __future__ import annotations

import getpass
import logging
import os
import platform
import socket
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

import keyproof
from keyproof import InvalidKeyError, ProgressCallback, report_step

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_KEY_SIZE: int = 4096
MIN_KEY_SIZE: int = 1024
KEY_SIZES: Tuple[int, ...] = (2048, 3072, 4096)
PUBLIC_EXPONENT: int = 65537
FILENAME_PREFIX: str = "keyproof"
TIMESTAMP_FORMAT: str = "%Y%m%d_%H%M%S"

ENV_OUTPUT_DIR: str = "KEYPROOF_OUTPUT_DIR"
ENV_PREFIX: str = "KEYPROOF_PREFIX"


def output_dir() -> Path:
    """Return the directory key files are written to, creating it if needed."""
    configured = os.environ.get(ENV_OUTPUT_DIR)
    directory = Path(configured).expanduser() if configured else Path.cwd()
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def filename_prefix() -> str:
    return os.environ.get(ENV_PREFIX) or FILENAME_PREFIX


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


def key_comment() -> str:
    """Build the ``user@host`` comment written into the public key line."""
    return f"{getpass.getuser()}@{socket.gethostname()}"


def key_file_paths(
    directory: Union[str, Path],
    prefix: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Tuple[Path, Path]:
    """Return ``(public_path, private_path)`` for a timestamped key pair."""
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    base = Path(directory) / f"{prefix or filename_prefix()}_rsa_{stamp}"
    return base.with_name(base.name + ".pub"), base


# ---------------------------------------------------------------------------
# Generation & file store
# ---------------------------------------------------------------------------


def generate_key_pair(bits: int = DEFAULT_KEY_SIZE) -> RSAPrivateKey:
    """Generate an RSA private key (public exponent 65537)."""
    if bits < MIN_KEY_SIZE:
        raise InvalidKeyError(f"RSA key size must be at least {MIN_KEY_SIZE} bits.")
    return rsa.generate_private_key(
        public_exponent=PUBLIC_EXPONENT,
        key_size=bits,
    )


def write_key_pair(
    private_key: RSAPrivateKey,
    private_path: Union[str, Path],
    public_path: Union[str, Path],
    comment: str = "",
) -> None:
    """
    Write both key files.

    The private key is written as unencrypted PKCS#1 PEM
    (``BEGIN RSA PRIVATE KEY``) with owner-only permissions; the public key
    as a single OpenSSH line followed by *comment*.
    """
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_line = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.OpenSSH,
        format=serialization.PublicFormat.OpenSSH,
    )
    if comment:
        public_line += b" " + comment.encode("utf-8")

    write_key_file(private_path, private_pem, private=True)
    write_key_file(public_path, public_line + b"\n")


def generate_key_files(
    private_path: Union[str, Path],
    public_path: Union[str, Path],
    bits: int = DEFAULT_KEY_SIZE,
    comment: str = "",
) -> None:
    """Generate a fresh key pair of *bits* bits and write it to disk."""
    write_key_pair(generate_key_pair(bits), private_path, public_path, comment)


def write_key_file(path: Union[str, Path], data: bytes, private: bool = False) -> Path:
    """Write *data* to *path*; private keys are restricted to the owner."""
    path = Path(path)
    path.write_bytes(data)
    if private and platform.system() != "Windows":
        try:
            os.chmod(path, 0o600)
        except OSError as exc:
            logger.warning("Could not restrict permissions on %s: %s", path, exc)
    logger.info("Wrote %s (%d bytes).", path, len(data))
    return path


def remove_existing(*paths: Path) -> None:
    for path in paths:
        if path.exists():
            logger.info("Removing existing %s.", path)
            path.unlink()


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


@dataclass
class KeyPairResult:
    """Files produced by a verified run."""

    public_path: Path
    private_path: Path
    comment: str
    key_size: int
    message: str

    def public_key_text(self) -> str:
        return self.public_path.read_text("utf-8").strip()


def create_and_test_key_pair(
    directory: Optional[Union[str, Path]] = None,
    bits: int = DEFAULT_KEY_SIZE,
    comment: Optional[str] = None,
    *,
    progress_callback: Optional[ProgressCallback] = None,
) -> KeyPairResult:
    """
    Generate, write, re-read and verify an RSA key pair.

    Parameters
    ----------
    directory : path-like, optional
        Target directory (default: :func:`output_dir`).
    bits : int
        RSA modulus size.
    comment : str, optional
        Public key comment (default: :func:`key_comment`).
    progress_callback : callable(step, status)
        Called with ``"start"``, then ``"ok"`` or ``"failed"`` per step.

    Any error aborts the run and propagates; there is no partial result.
    """
    with report_step("Preparing key generation", progress_callback):
        target = Path(directory) if directory is not None else output_dir()
        public_path, private_path = key_file_paths(target)
        remove_existing(public_path, private_path)

    if comment is None:
        with report_step("Building key comment", progress_callback):
            comment = key_comment()

    with report_step(f"Generating {bits}-bit key pair", progress_callback):
        private_key = generate_key_pair(bits)

    with report_step("Writing key files", progress_callback):
        write_key_pair(private_key, private_path, public_path, comment)

    result = keyproof.verify_key_files(
        public_path,
        private_path,
        expected_bits=bits,
        progress_callback=progress_callback,
    )
    logger.info("Key pair %s verified.", private_path)
    return KeyPairResult(public_path, private_path, comment, result.key_size, result.message)


# ---------------------------------------------------------------------------
# Console run (python keygen.py [bits])
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    def _print_step(step: str, status: str) -> None:
        if status == keyproof.STEP_START:
            print(f"{step}... ", end="", flush=True)
        elif status == keyproof.STEP_OK:
            print("Ok.")
        else:
            print("Failed!")

    key_bits = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_KEY_SIZE
    try:
        outcome = create_and_test_key_pair(bits=key_bits, progress_callback=_print_step)
    except Exception as exc:
        print(f"\nKey pair generation failed ({exc})")
        sys.exit(1)

    print("\nKey pair created successfully.")
    print(f"\nYour public key:\n  {outcome.public_path}")
    print(f"\nYour private key:\n  {outcome.private_path}")
