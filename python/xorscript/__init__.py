"""XOR script system solver over GF(2)."""
