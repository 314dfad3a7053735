"""
Scores travel as decimal strings in JSON.

JSON consumers commonly parse numbers as doubles, which cannot represent every 64-bit integer.
"""


def encode_score(value: int) -> str:
    return str(value)
