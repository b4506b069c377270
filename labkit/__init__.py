"""Small console exercises: magic squares, 4x4 matrices, number words and palindromes."""

__version__ = "0.1.0"
__all__ = ["magic", "matrix", "matcalc", "numwords", "palindrome"]