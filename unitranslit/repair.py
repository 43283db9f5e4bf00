# unitranslit/repair.py
import ftfy


def repair_text(s: str) -> str:
    """
    Undoes mojibake such as "rÃ©flexion" -> "réflexion".
    Only the encoding is fixed; quotes, ligatures and normalization are left as they are.
    """
    if not isinstance(s, str):
        s = str(s)
    return ftfy.fix_encoding(s)
