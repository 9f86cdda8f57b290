"""ElGamal-style encryption on the parametrized Pell hyperbola, with PROJ and PISO encodings."""

__version__ = "0.1.0"

__all__ = ["__version__"]