"""Simulated Kyber-512 key encapsulation and a demo command."""

__version__ = "0.1.0"