"""In-memory enclave and cluster registry with runtime constants, fees and call weights."""

__version__ = "0.1.0"

__all__ = ["constants", "fees", "primitives", "sgx", "staking", "version", "weights"]