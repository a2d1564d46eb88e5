import re
from collections import namedtuple
from typing import Optional

ICAO = "ICAO"
IATA = "IATA"
LID = "LID"
TC_LID = "TC_LID"
FAA_LID = "FAA_LID"

LID_AUTHORITIES = {"FAA": FAA_LID, "TC": TC_LID}

LookupCode = namedtuple("LookupCode", ["code", "code_type"])


def validate_code(code_type: str, code: str) -> bool:
    """Checks the length/pattern rule of a code type. Unknown types are never valid."""
    # upper() can lengthen a string ("ß" -> "SS"), such codes match no rule.
    if len(code.upper()) != len(code):
        return False
    code = code.upper()
    code_type = code_type.upper()

    if code_type == ICAO:
        return len(code) == 4
    if code_type == IATA:
        return len(code) == 3
    if code_type == TC_LID:
        return re.search(r"C[A-Z0-9]{3}", code) is not None and len(code) == 4
    if code_type == FAA_LID:
        return re.search(r"[A-Z0-9]{3}", code) is not None and 2 < len(code) <= 4
    return False


def lid_rule(authority: str) -> Optional[str]:
    """Maps a local authority (FAA or TC) to its LID code type"""
    return LID_AUTHORITIES.get(authority.upper())
