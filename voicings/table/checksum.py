from typing import Union, Dict, Any
from pathlib import Path
import hashlib
import json


def compute_checksum(
    data_to_hash: Union[Path, bytes, Dict[str, Any]],
    algorithm: str = "sha256",
    chunk_size: int = 4096,
) -> str:
    """Computes the checksum of a file, some bytes, or a JSON-serializable dict.

    Dictionaries are hashed through their sorted, indented JSON dump, so two tables with
    the same contents hash the same regardless of key order.

    Parameters
    ----------
    data_to_hash : :class:`pathlib.Path` or bytes or dict
       Location, bytes of file, or dictionary to compute checksum for.
    algorithm : str, optional
       Hash algorithm (from :func:`hashlib.algorithms_guaranteed`); default ``sha256``.
    chunk_size : int, optional
       Chunk size for iterating through file.

    Raises
    ------
    :class:`FileNotFoundError`
       Unknown path.
    :class:`ValueError`
       Unknown algorithm.

    Returns
    -------
    str
       Hex representation of checksum.
    """
    if algorithm not in hashlib.algorithms_guaranteed or algorithm.startswith("shake"):
        raise ValueError("Unknown algorithm")
    computed = hashlib.new(algorithm)
    if isinstance(data_to_hash, bytes):
        computed.update(data_to_hash)
    elif isinstance(data_to_hash, dict):
        computed.update(
            json.dumps(data_to_hash, indent=2, sort_keys=True).encode("utf-8")
        )
    else:
        with open(data_to_hash, "rb") as f:
            for data in iter(lambda: f.read(chunk_size), b""):
                computed.update(data)
    return computed.hexdigest()
